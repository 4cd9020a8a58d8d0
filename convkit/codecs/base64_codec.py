"""UTF-8 text <-> Base64."""

import base64
import binascii

from convkit.errors import PreconditionError

ENCODE_FAILED_MESSAGE = "Failed to encode text as Base64."
DECODE_FAILED_MESSAGE = "Failed to decode Base64. Check that the input is valid Base64."


def encode_text(text: str) -> str:
    """Encode *text* (as UTF-8) to standard Base64."""
    if not text or not text.strip():
        return ""
    try:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")
    except UnicodeEncodeError as exc:
        # Lone surrogates cannot be encoded.
        raise PreconditionError(ENCODE_FAILED_MESSAGE) from exc


def decode_text(value: str) -> str:
    """Decode Base64 back to UTF-8 text.

    Whitespace inside the value is ignored and missing ``=`` padding is
    tolerated, like a browser's ``atob``.
    """
    if not value or not value.strip():
        return ""
    compact = "".join(value.split())
    compact += "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(compact, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise PreconditionError(DECODE_FAILED_MESSAGE) from exc
