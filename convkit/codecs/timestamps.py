"""Unix timestamp <-> date conversion (UTC)."""

import math
import re
import time
from datetime import datetime, timedelta, timezone

from convkit.errors import PreconditionError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

INVALID_TIMESTAMP_MESSAGE = "Not a valid Unix timestamp."
INVALID_DATE_MESSAGE = "Not a valid date."

# Leading integer, like JavaScript's parseInt.
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def timestamp_to_date(value: str) -> str:
    """Convert seconds (up to 10 digits, sign excluded) or milliseconds to ``YYYY-MM-DDTHH:MM:SS``."""
    match = _LEADING_INT_RE.match(value or "")
    if not match:
        raise PreconditionError(INVALID_TIMESTAMP_MESSAGE)

    number = int(match.group(1))
    millis = number if len(str(abs(number))) > 10 else number * 1000
    try:
        moment = EPOCH + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise PreconditionError(INVALID_TIMESTAMP_MESSAGE) from exc
    return moment.replace(tzinfo=None).isoformat(timespec="seconds")


def date_to_timestamp(value: str) -> int:
    """Convert an ISO-8601 date/time to whole Unix seconds; naive values are UTC."""
    text = (value or "").strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError as exc:
        raise PreconditionError(INVALID_DATE_MESSAGE) from exc

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return math.floor(moment.timestamp())


def current_timestamp() -> int:
    return int(time.time())
