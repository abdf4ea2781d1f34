import json
import logging
from typing import Any, Dict, List, Optional

from src.core.domain.notification_errors import InvalidFieldValueError
from src.payload.interfaces.payload_source import PayloadSource

logger = logging.getLogger(__name__)


class JsonFieldError(ValueError):
    """A JSON sub-item lacks a field or holds a value of the wrong shape."""
    pass


def optional_non_empty(source: PayloadSource, key: str) -> Optional[str]:
    value = source.get_string(key)
    return value if value else None


def parse_json_array(raw: Optional[str]) -> Optional[List[Any]]:
    """
    Best-effort: returns None for absent, malformed or non-array JSON.
    """
    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # Deeply nested input exhausts the decoder stack
        logger.debug(f"Unable to parse JSON array: {e}")
        return None
    if not isinstance(parsed, list):
        logger.debug("JSON value is not an array")
        return None
    return parsed


def require_json_array(field: str, raw: Optional[str]) -> List[Any]:
    """
    Strict counterpart of `parse_json_array` for variants that fail on bad input.
    """
    parsed = parse_json_array(raw)
    if parsed is None:
        raise InvalidFieldValueError(field, "expected a JSON array")
    return parsed


def _coerce(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise JsonFieldError(f"Value for \"{key}\" is not a string")


def json_string(entry: Any, key: str) -> str:
    if not isinstance(entry, dict):
        raise JsonFieldError("Entry is not a JSON object")
    if entry.get(key) is None:
        raise JsonFieldError(f"No value for \"{key}\"")
    return _coerce(key, entry[key])


def json_opt_string(entry: Dict[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = entry.get(key)
    if value is None:
        return default
    try:
        return _coerce(key, value)
    except JsonFieldError:
        return default
