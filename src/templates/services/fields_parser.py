from src.core.domain.notification_errors import InvalidFieldValueError
from src.payload.domain.payload_keys import PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.template_type import ActionType, TemplateType
from src.templates.domain.templates import TemplateFields


def _action_type(source: PayloadSource) -> ActionType:
    raw = source.get_string(PayloadKeys.ACTION_TYPE)
    if raw is None:
        return ActionType.NONE
    try:
        return ActionType(raw)
    except ValueError:
        raise InvalidFieldValueError(PayloadKeys.ACTION_TYPE, f"unknown action type {raw!r}")


def parse_template_fields(source: PayloadSource) -> TemplateFields:
    """
    Reads the fields every variant shares. Fails fast on a missing version, title or body.
    """
    payload_version = source.get_required_string(PayloadKeys.VERSION)
    title = source.get_required_string(PayloadKeys.TITLE)
    body = source.get_required_string(PayloadKeys.BODY)

    return TemplateFields(
        title=title,
        body=body,
        payload_version=payload_version,
        expanded_body_text=source.get_string(PayloadKeys.EXPANDED_BODY_TEXT),
        ticker=source.get_string(PayloadKeys.TICKER),
        template_type=TemplateType.from_string(source.get_string(PayloadKeys.TEMPLATE_TYPE)),
        image_url=source.get_string(PayloadKeys.IMAGE_URL),
        action_type=_action_type(source),
        action_uri=source.get_string(PayloadKeys.ACTION_URI),
        small_icon=source.get_string(PayloadKeys.SMALL_ICON)
        or source.get_string(PayloadKeys.LEGACY_SMALL_ICON),
        large_icon=source.get_string(PayloadKeys.LARGE_ICON),
        title_text_color=source.get_string(PayloadKeys.TITLE_TEXT_COLOR),
        body_text_color=source.get_string(PayloadKeys.BODY_TEXT_COLOR),
        background_color=source.get_string(PayloadKeys.BACKGROUND_COLOR),
        small_icon_color=source.get_string(PayloadKeys.SMALL_ICON_COLOR),
        tag=source.get_string(PayloadKeys.TAG),
        sound=source.get_string(PayloadKeys.SOUND),
        channel_id=source.get_string(PayloadKeys.CHANNEL_ID),
        badge_count=source.get_int(PayloadKeys.BADGE_COUNT) or 0,
        is_sticky=source.get_bool(PayloadKeys.STICKY),
        priority_string=source.get_string(PayloadKeys.PRIORITY),
        visibility_string=source.get_string(PayloadKeys.VISIBILITY),
        is_from_intent=source.is_from_intent,
    )
