import re
from typing import Optional

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

INT32_RANGE = (-(2 ** 31), 2 ** 31 - 1)
INT64_RANGE = (-(2 ** 63), 2 ** 63 - 1)


def _to_bounded_int(value: Optional[str], bounds) -> Optional[int]:
    if value is None or not _INTEGER_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if number < bounds[0] or number > bounds[1]:
        return None
    return number


def to_int(value: Optional[str]) -> Optional[int]:
    return _to_bounded_int(value, INT32_RANGE)


def to_long(value: Optional[str]) -> Optional[int]:
    return _to_bounded_int(value, INT64_RANGE)


def to_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None
