from typing import Optional


def compute_expiry(duration: Optional[int], end_timestamp: Optional[int], now: int) -> Optional[int]:
    """
    Duration (seconds from `now`) wins over an absolute end timestamp.
    None when neither is provided.
    """
    if duration is not None:
        return now + duration
    if end_timestamp is not None:
        return end_timestamp
    return None


def is_expired(expiry: int, now: int) -> bool:
    return now > expiry


def remaining(expiry: int, now: int) -> int:
    return expiry - now
