import json

import pytest

from src.core.domain.notification_errors import MissingRequiredFieldError, ValidationError
from src.payload.services.map_source import MapSource
from src.templates.domain.template_type import TemplateKind, TemplateType
from src.templates.services.template_resolver import StandardTemplateResolver

NOW = 1_700_000_000


def _payload(**extra):
    data = {"title": "T", "body": "B", "version": "1"}
    data.update(extra)
    return MapSource(data)


def _resolve(source):
    return StandardTemplateResolver().resolve(source, NOW)


def test_payload_without_type_resolves_to_legacy_basic():
    template = _resolve(_payload())

    assert template.kind is TemplateKind.BASIC
    assert template.legacy is True
    assert template.fields.template_type is TemplateType.UNKNOWN


@pytest.mark.parametrize("raw_type", ["", "video", "BASIC", "car ", "unknown", "adb_basic"])
def test_unrecognised_type_never_fails_resolution(raw_type):
    template = _resolve(_payload(template_type=raw_type))
    assert template.kind is TemplateKind.BASIC
    assert template.legacy is True


def test_basic_type_is_not_legacy():
    template = _resolve(_payload(template_type="basic"))
    assert template.kind is TemplateKind.BASIC
    assert template.legacy is False


def test_carousel_mode_selects_variant():
    items = json.dumps([{"img": "https://x/1.png"}])

    auto = _resolve(_payload(template_type="car", car_layout="default", items=items))
    default_mode = _resolve(_payload(template_type="car", car_layout="default", items=items, car_mode="auto"))
    manual = _resolve(_payload(template_type="car", car_layout="default", items=items, car_mode="manual"))
    other = _resolve(_payload(template_type="car", car_layout="default", items=items, car_mode="swipe"))

    assert auto.kind is TemplateKind.AUTO_CAROUSEL
    assert default_mode.kind is TemplateKind.AUTO_CAROUSEL
    assert manual.kind is TemplateKind.MANUAL_CAROUSEL
    assert other.kind is TemplateKind.MANUAL_CAROUSEL


@pytest.mark.parametrize("raw_type, kind, extra", [
    ("zb", TemplateKind.ZERO_BEZEL, {}),
    ("input", TemplateKind.INPUT_BOX, {"input_receiver": "receiver"}),
    ("timer", TemplateKind.TIMER, {"title_alt": "Done", "tmr_dur": "30"}),
])
def test_dispatches_simple_variants(raw_type, kind, extra):
    template = _resolve(_payload(template_type=raw_type, **extra))
    assert template.kind is kind


def test_variant_failures_propagate():
    with pytest.raises(MissingRequiredFieldError):
        _resolve(_payload(template_type="input"))
    with pytest.raises(ValidationError):
        _resolve(_payload(template_type="cat"))


def test_missing_base_field_fails_even_for_unknown_type():
    with pytest.raises(MissingRequiredFieldError) as exc:
        _resolve(MapSource({"title": "T", "body": "B"}))
    assert exc.value.field == "version"
