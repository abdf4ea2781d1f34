import logging
from typing import Optional

from src.core.domain.notification_errors import InvalidScheduleError
from src.core.observability.notification_event_logger import NotificationEventLogger
from src.core.time.time_source import TimeSource
from src.engines.remind_later_schedule import RemindLaterSchedule, compute_remind_later
from src.orchestration.interfaces.active_notifications import ActiveNotifications
from src.orchestration.interfaces.scheduler import Scheduler
from src.payload.domain.event_payload import EventPayload
from src.payload.domain.payload_keys import EventActions, PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource

logger = logging.getLogger(__name__)


class RemindLaterHandler:
    """
    Handles a press of the remind-later button.
    The displayed notification is dismissed whenever it has a tag, whether or not
    the reminder could be scheduled.
    """

    def __init__(
            self,
            scheduler: Scheduler,
            active_notifications: ActiveNotifications,
            time_source: TimeSource,
            event_logger: Optional[NotificationEventLogger] = None
    ):
        self.scheduler = scheduler
        self.active_notifications = active_notifications
        self.time_source = time_source
        self.event_logger = event_logger or NotificationEventLogger()

    def handle(self, source: PayloadSource) -> RemindLaterSchedule:
        tag = source.get_string(PayloadKeys.TAG)
        now = self.time_source.epoch_seconds()

        try:
            schedule = compute_remind_later(
                duration_seconds=source.get_long(PayloadKeys.REMIND_LATER_DURATION),
                absolute_timestamp_seconds=source.get_long(PayloadKeys.REMIND_LATER_TIMESTAMP),
                now=now,
            )
        except InvalidScheduleError as e:
            logger.warning(f"Remind later rejected: {e}")
            self.event_logger.remind_later_rejected(tag, e.seconds_until_fire)
            raise
        finally:
            if tag:
                self.active_notifications.cancel(tag)
            else:
                logger.debug("No tag on the remind later payload, nothing to dismiss")

        event = EventPayload(
            action=EventActions.SCHEDULED_NOTIFICATION_BROADCAST,
            extras=source.as_dict(),
        )
        self.scheduler.schedule(event, schedule.trigger_at)
        self.event_logger.remind_later_scheduled(tag, schedule.trigger_at, schedule.seconds_until_fire)
        return schedule
