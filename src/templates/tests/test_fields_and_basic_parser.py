import json

import pytest

from src.core.domain.notification_errors import InvalidFieldValueError
from src.payload.services.event_source import EventSource
from src.payload.services.map_source import MapSource
from src.templates.domain.template_type import (
    ActionType,
    NotificationImportance,
    NotificationPriority,
    NotificationVisibility,
)
from src.templates.services.basic_parser import parse_action_buttons, parse_basic
from src.templates.services.fields_parser import parse_template_fields


def _data(**extra):
    data = {"template_type": "basic", "title": "T", "body": "B", "version": "1"}
    data.update(extra)
    return data


def test_base_fields_defaults():
    fields = parse_template_fields(MapSource(_data()))

    assert fields.action_type is ActionType.NONE
    assert fields.badge_count == 0
    assert fields.is_sticky is None
    assert fields.priority is NotificationPriority.PRIORITY_DEFAULT
    assert fields.importance is NotificationImportance.DEFAULT
    assert fields.visibility is NotificationVisibility.VISIBILITY_PRIVATE


def test_base_fields_read_from_payload():
    fields = parse_template_fields(MapSource(_data(
        icon="legacy_icon",
        n_count="4",
        sticky="true",
        n_priority="PRIORITY_HIGH",
        n_visibility="VISIBILITY_PUBLIC",
        a_type="WEBURL",
        uri="https://example.com",
    )))

    assert fields.small_icon == "legacy_icon"
    assert fields.badge_count == 4
    assert fields.is_sticky is True
    assert fields.importance is NotificationImportance.HIGH
    assert fields.visibility is NotificationVisibility.VISIBILITY_PUBLIC
    assert fields.action_type is ActionType.WEBURL
    assert fields.action_uri == "https://example.com"


def test_small_icon_wins_over_legacy_icon():
    fields = parse_template_fields(MapSource(_data(icon="old", small_icon="new")))
    assert fields.small_icon == "new"


def test_unknown_action_type_is_invalid():
    with pytest.raises(InvalidFieldValueError) as exc:
        parse_template_fields(MapSource(_data(a_type="TELEPORT")))
    assert exc.value.field == "a_type"


def test_action_buttons_degrade_instead_of_failing():
    raw = json.dumps([
        {"label": "Open", "uri": "https://example.com", "type": "WEBURL"},
        {"label": "Go", "uri": "app://home", "type": "DEEPLINK"},
        {"label": "", "type": "DISMISS"},
        {"uri": "https://example.com", "type": "WEBURL"},
        {"label": "Odd", "type": "SOMETHING"},
        {"label": "Close", "uri": "ignored", "type": "DISMISS"},
        "not an object",
    ])

    buttons = parse_action_buttons(raw)

    assert [b.label for b in buttons] == ["Open", "Go", "Odd", "Close"]
    assert buttons[0].link == "https://example.com"
    assert buttons[2].type is ActionType.NONE
    assert buttons[3].link is None


@pytest.mark.parametrize("raw", [None, "", "[broken", '{"label": "x"}'])
def test_malformed_action_buttons_yield_empty_list(raw):
    assert parse_action_buttons(raw) == ()


def test_deeply_nested_action_buttons_do_not_break_basic():
    template = parse_basic(MapSource(_data(act="[" * 200_000 + "]" * 200_000)))

    assert template.action_buttons == ()
    assert template.fields.title == "T"


def test_basic_remind_later_offered_with_text_and_time():
    template = parse_basic(MapSource(_data(rem_txt="Later", rem_sec="60")))

    assert template.remind_later_duration == 60
    assert template.offers_remind_later is True


def test_basic_remind_later_not_offered_without_time_or_text():
    assert parse_basic(MapSource(_data(rem_txt="Later"))).offers_remind_later is False
    assert parse_basic(MapSource(_data(rem_ts="1700000000"))).offers_remind_later is False


def test_remind_later_hidden_for_legacy_and_event_payloads():
    data = _data(rem_txt="Later", rem_ts="1700000000")

    assert parse_basic(MapSource(data), legacy=True).offers_remind_later is False
    assert parse_basic(EventSource(data)).offers_remind_later is False


def test_malformed_remind_later_numbers_read_as_absent():
    template = parse_basic(MapSource(_data(rem_txt="Later", rem_sec="soon", rem_ts="x")))

    assert template.remind_later_duration is None
    assert template.remind_later_timestamp is None
    assert template.offers_remind_later is False
