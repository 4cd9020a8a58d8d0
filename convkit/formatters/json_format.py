"""JSON pretty-printing and minification."""

import json
from typing import Any

from convkit.errors import PreconditionError

INVALID_JSON_MESSAGE = "Invalid JSON. Please check the input."


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise PreconditionError(INVALID_JSON_MESSAGE) from exc


def format_json(text: str, indent: int = 2) -> str:
    """Re-serialise *text* with *indent* spaces, keeping key order."""
    return json.dumps(_parse(text), indent=indent, ensure_ascii=False)


def minify_json(text: str) -> str:
    return json.dumps(_parse(text), separators=(",", ":"), ensure_ascii=False)
