from dataclasses import dataclass
from typing import Optional

from src.core.domain.notification_errors import InvalidScheduleError


@dataclass(frozen=True)
class RemindLaterSchedule:
    seconds_until_fire: int
    trigger_at: int


def compute_remind_later(
        duration_seconds: Optional[int],
        absolute_timestamp_seconds: Optional[int],
        now: int
) -> RemindLaterSchedule:
    """
    A positive duration wins; otherwise the absolute timestamp is used.
    Raises InvalidScheduleError when the reminder would fire now or in the past.
    """
    duration = duration_seconds or 0
    timestamp = absolute_timestamp_seconds or 0

    if duration > 0:
        seconds_until_fire = duration
        trigger_at = now + duration
    else:
        seconds_until_fire = timestamp - now
        trigger_at = timestamp

    if seconds_until_fire <= 0:
        raise InvalidScheduleError(seconds_until_fire)
    return RemindLaterSchedule(seconds_until_fire=seconds_until_fire, trigger_at=trigger_at)
