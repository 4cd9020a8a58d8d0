"""Error kinds raised by converters and rendered by the API and CLI."""


class ConverterError(Exception):
    """Base class: carries a caller-facing message and an HTTP status code."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PreconditionError(ConverterError):
    """Required input missing, empty or unusable -- the caller's fault."""

    status_code = 400


class ConversionError(ConverterError):
    """Unexpected failure while converting; the cause is logged, not exposed."""

    status_code = 500


class UpstreamError(ConversionError):
    """A third-party service the converter depends on failed."""

    status_code = 502
