import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

from src.core.domain.notification_errors import NotificationError


class NotificationEventLogger:
    """
    Records what the builder and remind-later handler did, one JSON object per line.
    Never decides whether a failure is surfaced; callers re-raise after recording.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("notifications")

    def emit(self, event_type: str, **fields: Any) -> None:
        record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        record.update(fields)
        self._logger.info(json.dumps(record, default=str, ensure_ascii=True))

    def built(self, kind: str, channel_id: str, degraded: bool, actions: Iterable[Optional[str]]) -> None:
        self.emit(
            "notification_built",
            kind=kind,
            channel_id=channel_id,
            degraded=degraded,
            events=list(actions),
        )

    def build_failed(self, error: NotificationError, from_event: bool) -> None:
        self.emit(
            "notification_build_failed",
            error_type=type(error).__name__,
            reason=str(error),
            from_event=from_event,
        )

    def remind_later_scheduled(self, tag: Optional[str], trigger_at: int, seconds_until_fire: int) -> None:
        self.emit(
            "remind_later_scheduled",
            tag=tag,
            trigger_at=trigger_at,
            seconds_until_fire=seconds_until_fire,
        )

    def remind_later_rejected(self, tag: Optional[str], seconds_until_fire: int) -> None:
        self.emit("remind_later_rejected", tag=tag, seconds_until_fire=seconds_until_fire)
