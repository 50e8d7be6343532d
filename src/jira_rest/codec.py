"""JSON encode/decode for request payloads and response bodies."""

import json
from typing import Any

from .errors import DecodeError
from .result import Err, Ok, Result


def decode(text: str) -> Result:
    """Decode a JSON document into ``Ok(value)`` or ``Err`` on malformed input."""
    try:
        return Ok(json.loads(text))
    except (json.JSONDecodeError, TypeError) as e:
        return Err.from_exception(DecodeError(str(e)))


def encode(value: Any) -> str:
    """Serialize a payload for a POST body. Strings pass through unchanged."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))
