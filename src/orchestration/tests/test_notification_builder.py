import json
import logging

import pytest

from src.config.settings import settings
from src.core.domain.notification_errors import ConstructionFailedError, MissingRequiredFieldError
from src.core.observability.notification_event_logger import NotificationEventLogger
from src.core.time.frozen_time_source import FrozenTimeSource
from src.engines.carousel_index_engine import CarouselWindow
from src.infrastructure.in_memory_collaborators import (
    InMemoryActiveNotifications,
    InMemoryScheduler,
    RecordingRenderer,
    StaticImageCache,
)
from src.orchestration.services.notification_builder import NotificationBuilder
from src.payload.services.event_source import EventSource
from src.payload.services.map_source import MapSource
from src.templates.domain.template_type import TemplateKind
from src.templates.services.template_resolver import StandardTemplateResolver

NOW = 1_700_000_000
IMAGES = [f"https://x/{i}.png" for i in range(5)]


class _Harness:
    def __init__(self, available=(), displayed=()):
        self.time_source = FrozenTimeSource(NOW)
        self.image_cache = StaticImageCache(available)
        self.scheduler = InMemoryScheduler()
        self.active = InMemoryActiveNotifications(displayed)
        self.renderer = RecordingRenderer()
        self.builder = NotificationBuilder(
            resolver=StandardTemplateResolver(),
            image_cache=self.image_cache,
            scheduler=self.scheduler,
            active_notifications=self.active,
            renderer=self.renderer,
            time_source=self.time_source,
            event_logger=NotificationEventLogger(logging.getLogger("test.notifications")),
        )


def _base(**extra):
    data = {"title": "T", "body": "B", "version": "1"}
    data.update(extra)
    return data


def _carousel(mode="manual", layout="filmstrip", **extra):
    return _base(
        template_type="car",
        car_mode=mode,
        car_layout=layout,
        items=json.dumps([{"img": uri, "txt": f"caption {i}"} for i, uri in enumerate(IMAGES)]),
        **extra,
    )


# --- Basic / legacy ---

def test_payload_without_type_builds_legacy_basic():
    harness = _Harness()
    result = harness.builder.build(MapSource(_base()))

    assert result.template.kind is TemplateKind.BASIC
    assert result.degraded is False
    assert result.channel_id == settings.DEFAULT_CHANNEL_ID
    assert harness.renderer.last["plan"].legacy is True
    assert harness.renderer.last["plan"].channel_name == settings.DEFAULT_CHANNEL_NAME


def test_basic_missing_image_is_hidden_not_fatal():
    harness = _Harness()
    result = harness.builder.build(MapSource(_base(template_type="basic", image="https://x/missing.png")))

    assert harness.renderer.last["plan"].images == {}
    assert result.template.fields.image_url == "https://x/missing.png"


def test_basic_remind_later_event_carries_raw_payload():
    harness = _Harness()
    data = _base(template_type="basic", rem_txt="Later", rem_sec="60", channel_id="promo")
    result = harness.builder.build(MapSource(data))

    event = result.event("remind_clicked")
    assert event is not None
    assert event.extras["rem_sec"] == "60"
    assert event.extras["channel_id"] == "promo"
    assert result.channel_id == "promo"


def test_legacy_basic_has_no_remind_later():
    harness = _Harness()
    result = harness.builder.build(MapSource(_base(rem_txt="Later", rem_sec="60")))
    assert result.events == ()


def test_event_sourced_rerender_uses_silent_channel():
    harness = _Harness()
    result = harness.builder.build(EventSource(_base(template_type="basic", channel_id="promo")))
    assert result.channel_id == settings.SILENT_CHANNEL_ID


# --- Carousel ---

def test_carousel_with_two_images_degrades_to_basic():
    harness = _Harness(available=IMAGES[:2])
    result = harness.builder.build(MapSource(_carousel(mode="auto", layout="default")))

    assert result.degraded is True
    assert result.template.kind is TemplateKind.BASIC
    assert result.template.fields.title == "T"
    assert result.window is None


def test_auto_carousel_renders_only_resolved_items_in_order():
    harness = _Harness(available=[IMAGES[4], IMAGES[0], IMAGES[2]])
    result = harness.builder.build(MapSource(_carousel(mode="auto", layout="default")))

    assert result.template.kind is TemplateKind.AUTO_CAROUSEL
    rendered = harness.renderer.last["filtered_items"]
    assert [item.image_uri for item in rendered] == [IMAGES[0], IMAGES[2], IMAGES[4]]


def test_manual_filmstrip_default_window():
    harness = _Harness(available=IMAGES)
    result = harness.builder.build(MapSource(_carousel()))

    assert result.window == CarouselWindow(0, 1, 2)
    assert result.event("filmstrip_right").extras["centerImageIndex"] == "1"


def test_manual_filmstrip_navigate_right():
    harness = _Harness(available=IMAGES)
    source = EventSource(_carousel(centerImageIndex="1"), action_name="filmstrip_right")

    result = harness.builder.build(source)

    assert result.window == CarouselWindow(1, 2, 3)
    assert result.event("filmstrip_left").extras["centerImageIndex"] == "2"
    assert result.channel_id == settings.SILENT_CHANNEL_ID


def test_manual_navigation_wraps_within_resolved_subset():
    harness = _Harness(available=IMAGES[:3])
    source = EventSource(_carousel(layout="default", centerImageIndex="2"), action_name="manual_right")

    result = harness.builder.build(source)

    assert result.window.center == 0
    assert result.event("manual_left") is not None


def test_outgoing_event_round_trips_through_builder():
    harness = _Harness(available=IMAGES)
    first = harness.builder.build(MapSource(_carousel()))

    second = harness.builder.build(EventSource.from_event(first.event("filmstrip_left")))

    assert second.window == CarouselWindow(4, 0, 1)


# --- Product catalog / rating ---

def _catalog():
    items = [
        {"title": f"Item {i}", "body": "b", "img": IMAGES[i], "price": "1", "uri": f"app://{i}"}
        for i in range(3)
    ]
    return _base(
        template_type="cat",
        cta_txt="Buy",
        cta_clr="FFFFFF",
        cta_txt_clr="000000",
        cta_uri="https://shop",
        display="vertical",
        items=json.dumps(items),
    )


def test_catalog_requires_every_image():
    harness = _Harness(available=IMAGES[:2])
    with pytest.raises(ConstructionFailedError):
        harness.builder.build(MapSource(_catalog()))
    assert harness.renderer.calls == []


def test_catalog_offers_thumbnail_events():
    harness = _Harness(available=IMAGES[:3])
    result = harness.builder.build(MapSource(_catalog()))

    indices = [event.extras["catalogItemIndex"] for event in result.events]
    assert indices == ["0", "1", "2"]


def _rating(**extra):
    actions = [{"uri": f"https://rate/{i}", "type": "WEBURL"} for i in range(5)]
    return _base(
        template_type="rate",
        rate_unselected_icon="https://x/off.png",
        rate_selected_icon="https://x/on.png",
        rate_act=json.dumps(actions),
        **extra,
    )


def test_rating_missing_icon_is_hard_failure():
    harness = _Harness(available=["https://x/off.png"])
    with pytest.raises(ConstructionFailedError):
        harness.builder.build(MapSource(_rating()))


def test_rating_selection_binds_confirm_action():
    harness = _Harness(available=["https://x/off.png", "https://x/on.png"])
    source = EventSource(_rating(ratingSelected="3"), action_name="rating_icon_clicked")

    result = harness.builder.build(source)

    plan = harness.renderer.last["plan"]
    assert plan.confirm_action == result.template.rating_actions[3]
    assert len(result.events) == 5


# --- Multi icon ---

def test_multi_icon_needs_three_bound_icons():
    items = [{"img": uri, "type": "NONE"} for uri in IMAGES[:4]]
    harness = _Harness(available=IMAGES[:2])

    with pytest.raises(ConstructionFailedError):
        harness.builder.build(MapSource(_base(template_type="icon", items=json.dumps(items))))


def test_multi_icon_renders_bound_icons():
    items = [{"img": uri, "type": "NONE"} for uri in IMAGES[:4]]
    harness = _Harness(available=IMAGES[:3])

    harness.builder.build(MapSource(_base(template_type="icon", items=json.dumps(items))))

    assert len(harness.renderer.last["filtered_items"]) == 3


# --- Timer ---

def _timer(**extra):
    return _base(template_type="timer", title_alt="Over", tag="sale", **extra)


def test_running_timer_schedules_expiry_event():
    harness = _Harness()
    harness.builder.build(MapSource(_timer(tmr_dur="90")))

    plan = harness.renderer.last["plan"]
    assert plan.timer_remaining == 90
    assert plan.timer_content.title == "T"

    event, trigger_at = harness.scheduler.scheduled[0]
    assert trigger_at == NOW + 91
    assert event.action == "timer_expired"
    assert "tmr_dur" not in event.extras
    assert event.extras["tmr_end"] == str(NOW + 90)


def test_expiry_event_renders_alternate_content_when_displayed():
    harness = _Harness(displayed=["sale"])
    harness.builder.build(MapSource(_timer(tmr_dur="90")))
    event, _ = harness.scheduler.scheduled[0]

    harness.time_source.advance_seconds(91)
    result = harness.builder.build(EventSource.from_event(event))

    assert harness.renderer.last["plan"].timer_content.title == "Over"
    assert result.channel_id == settings.SILENT_CHANNEL_ID


def test_expired_timer_for_dismissed_notification_fails():
    harness = _Harness(displayed=[])
    source = EventSource(_timer(tmr_end=str(NOW - 1)), action_name="timer_expired")

    with pytest.raises(ConstructionFailedError):
        harness.builder.build(source)


def test_expired_timer_without_tag_fails_when_event_sourced():
    harness = _Harness(displayed=["sale"])
    data = _timer(tmr_end=str(NOW - 1))
    del data["tag"]

    with pytest.raises(ConstructionFailedError):
        harness.builder.build(EventSource(data, action_name="timer_expired"))


def test_expired_timer_on_first_delivery_renders_alternate():
    harness = _Harness()
    harness.builder.build(MapSource(_timer(tmr_end=str(NOW - 1))))

    assert harness.renderer.last["plan"].timer_content.title == "Over"
    assert harness.scheduler.scheduled == []


# --- Input box / zero bezel ---

def test_input_box_offers_reply_with_default_hint():
    harness = _Harness()
    result = harness.builder.build(MapSource(_base(template_type="input", input_receiver="replies")))

    assert harness.renderer.last["plan"].input_hint == settings.INPUT_BOX_DEFAULT_REPLY_TEXT
    assert result.event("input_received") is not None


def test_input_box_after_reply_shows_feedback():
    harness = _Harness(available=["https://x/thanks.png"])
    data = _base(template_type="input", input_receiver="replies", feedback_txt="Thanks",
                 feedback_img="https://x/thanks.png")

    result = harness.builder.build(EventSource(data, action_name="input_received"))

    plan = harness.renderer.last["plan"]
    assert plan.input_hint is None
    assert "https://x/thanks.png" in plan.images
    assert result.events == ()


def test_zero_bezel_builds():
    harness = _Harness()
    result = harness.builder.build(MapSource(_base(template_type="zb", col_style="img")))
    assert result.template.kind is TemplateKind.ZERO_BEZEL


# --- Logging ---

def test_validation_failure_is_logged_and_raised(caplog):
    harness = _Harness()
    with caplog.at_level(logging.INFO, logger="test.notifications"):
        with pytest.raises(MissingRequiredFieldError):
            harness.builder.build(MapSource({"title": "T"}))

    record = json.loads(caplog.records[-1].getMessage())
    assert record["event_type"] == "notification_build_failed"
    assert record["error_type"] == "MissingRequiredFieldError"


def test_successful_build_is_logged(caplog):
    harness = _Harness()
    with caplog.at_level(logging.INFO, logger="test.notifications"):
        harness.builder.build(MapSource(_base()))

    record = json.loads(caplog.records[-1].getMessage())
    assert record["event_type"] == "notification_built"
    assert record["kind"] == "basic"
