"""JavaScript beautification.

The code is parsed first so that garbage is rejected with a client error
instead of being "beautified" into different garbage.
"""

import esprima
import jsbeautifier
from esprima.error_handler import Error as JavaScriptSyntaxError

from convkit.errors import ConversionError, PreconditionError
from convkit.utils.config import settings
from convkit.utils.logger import get_logger

log = get_logger(__name__)

NO_CODE_MESSAGE = "No code provided"
INVALID_CODE_MESSAGE = "Invalid JavaScript code"
BEAUTIFY_FAILED_MESSAGE = "Failed to beautify JavaScript"


def validate_js(code: str) -> None:
    """Raise ``PreconditionError`` unless *code* parses as an ES module (JSX allowed)."""
    try:
        esprima.parseModule(code, {"jsx": True})
    except JavaScriptSyntaxError as exc:
        log.debug("Rejected JavaScript: %s", exc)
        raise PreconditionError(INVALID_CODE_MESSAGE) from exc


def beautify_js(code: str, indent_size: int | None = None) -> str:
    if not code:
        raise PreconditionError(NO_CODE_MESSAGE)

    validate_js(code)

    try:
        opts = jsbeautifier.default_options()
        opts.indent_size = indent_size or settings.js_indent_size
        opts.end_with_newline = True
        return jsbeautifier.beautify(code, opts)
    except Exception as exc:
        log.exception("Error beautifying JavaScript")
        raise ConversionError(BEAUTIFY_FAILED_MESSAGE) from exc
