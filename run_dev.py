import json
import logging

from src.core.domain.notification_errors import NotificationError
from src.core.observability.notification_event_logger import NotificationEventLogger
from src.core.time.system_time_source import SystemTimeSource
from src.infrastructure.in_memory_collaborators import (
    InMemoryActiveNotifications,
    InMemoryScheduler,
    RecordingRenderer,
    StaticImageCache,
)
from src.orchestration.services.notification_builder import NotificationBuilder
from src.orchestration.services.remind_later_handler import RemindLaterHandler
from src.payload.services.event_source import EventSource
from src.payload.services.map_source import MapSource
from src.templates.services.template_resolver import StandardTemplateResolver


IMAGES = [f"https://example.com/img{i}.png" for i in range(5)]

DEMO_PAYLOADS = {
    "basic": {
        "template_type": "basic",
        "version": "1",
        "title": "Hello",
        "body": "A basic notification",
        "tag": "demo-basic",
        "rem_txt": "Remind me",
        "rem_sec": "60",
    },
    "legacy": {
        "version": "1",
        "title": "Legacy",
        "body": "No template type",
    },
    "carousel": {
        "template_type": "car",
        "version": "1",
        "title": "Carousel",
        "body": "Swipe through",
        "car_mode": "manual",
        "car_layout": "filmstrip",
        "items": json.dumps([{"img": uri, "txt": f"Caption {i}"} for i, uri in enumerate(IMAGES)]),
    },
}


def main():
    print("Initializing DEV environment...")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # 1. Collaborators
    time_source = SystemTimeSource()
    renderer = RecordingRenderer()
    scheduler = InMemoryScheduler()

    # 2. Builder
    builder = NotificationBuilder(
        resolver=StandardTemplateResolver(),
        image_cache=StaticImageCache(IMAGES),
        scheduler=scheduler,
        active_notifications=InMemoryActiveNotifications(),
        renderer=renderer,
        time_source=time_source,
        event_logger=NotificationEventLogger()
    )

    # 3. First deliveries
    results = {}
    for name, payload in DEMO_PAYLOADS.items():
        try:
            results[name] = builder.build(MapSource(payload))
        except NotificationError as e:
            print(f"{name}: failed with {type(e).__name__}: {e}")
            continue
        result = results[name]
        print(f"{name}: {result.template.kind.value} on {result.channel_id} (window={result.window})")

    # 4. Navigate the carousel right, feeding the outgoing event back in
    carousel = results.get("carousel")
    if carousel is not None:
        event = carousel.events[-1]
        navigated = builder.build(EventSource.from_event(event))
        print(f"after {event.action}: window={navigated.window} on {navigated.channel_id}")

    # 5. Press "remind me later" on the basic notification, then deliver the reminder
    basic = results.get("basic")
    if basic is not None:
        active = InMemoryActiveNotifications(displayed=["demo-basic"])
        handler = RemindLaterHandler(scheduler, active, time_source)
        schedule = handler.handle(EventSource.from_event(basic.event("remind_clicked")))
        print(f"reminder in {schedule.seconds_until_fire}s, dismissed {active.cancelled}")
        for event in scheduler.due(schedule.trigger_at):
            reminder = builder.build(EventSource.from_event(event))
            print(f"reminder delivered on {reminder.channel_id}")

    print(f"Rendered {len(renderer.calls)} notifications, {len(scheduler.scheduled)} scheduled.")


if __name__ == "__main__":
    main()
