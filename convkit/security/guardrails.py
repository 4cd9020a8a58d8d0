"""Input validation for converter requests."""

import re
from typing import Optional, Tuple

from convkit.utils.config import settings

_IPV4_RE = re.compile(r"(\d{1,3}\.){3}\d{1,3}")
_IPV6_RE = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")


def validate_input(
    text: Optional[str],
    field: str = "input",
    allow_blank: bool = False,
    check_length: bool = True,
) -> Tuple[bool, Optional[str]]:
    """Return (ok, reason).  ``ok`` is False for missing, blank or oversized input.

    With ``allow_blank`` a whitespace-only value is accepted; an empty or
    missing one never is.  ``check_length=False`` skips the
    ``MAX_INPUT_LENGTH`` limit.
    """
    if not text:
        return False, f"No {field} provided"
    if not text.strip() and not allow_blank:
        return False, f"No {field} provided"
    if check_length and len(text) > settings.max_input_length:
        label = field[:1].upper() + field[1:]
        return False, f"{label} exceeds max length ({settings.max_input_length} chars)."
    return True, None


def is_valid_ip(ip: str) -> bool:
    """Dotted-quad IPv4 (octets 0-255) or uncompressed 8-group IPv6."""
    if _IPV4_RE.fullmatch(ip):
        return all(0 <= int(part) <= 255 for part in ip.split("."))
    return bool(_IPV6_RE.fullmatch(ip))
