import logging
from typing import Any, List, Optional, Tuple

from src.payload.domain.payload_keys import ActionButtonKeys, PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.field_extractor import (
    JsonFieldError,
    json_opt_string,
    json_string,
    parse_json_array,
)
from src.templates.domain.items import ActionButton
from src.templates.domain.template_type import ActionType
from src.templates.domain.templates import BasicTemplate
from src.templates.services.fields_parser import parse_template_fields

logger = logging.getLogger(__name__)


def _action_button_from_entry(entry: Any) -> Optional[ActionButton]:
    try:
        label = json_string(entry, ActionButtonKeys.LABEL)
        raw_type = json_string(entry, ActionButtonKeys.TYPE)
    except JsonFieldError as e:
        logger.warning(f"Dropping malformed action button: {e}")
        return None

    if not label:
        logger.debug("Dropping action button with an empty label")
        return None

    try:
        action_type = ActionType(raw_type)
    except ValueError:
        logger.warning(f"Invalid action button type {raw_type!r}, defaulting to NONE")
        action_type = ActionType.NONE

    link = None
    if action_type.opens_uri:
        link = json_opt_string(entry, ActionButtonKeys.URI, "")
    return ActionButton(label=label, link=link, type=action_type)


def parse_action_buttons(raw: Optional[str]) -> Tuple[ActionButton, ...]:
    """
    Best-effort: a malformed array yields no buttons, a malformed entry is skipped.
    """
    entries = parse_json_array(raw)
    if entries is None:
        if raw is not None:
            logger.warning("Action buttons are not a valid JSON array, ignoring them")
        return ()

    buttons: List[ActionButton] = []
    for entry in entries:
        button = _action_button_from_entry(entry)
        if button is not None:
            buttons.append(button)
    return tuple(buttons)


def parse_basic(source: PayloadSource, legacy: bool = False) -> BasicTemplate:
    fields = parse_template_fields(source)
    action_buttons_string = source.get_string(PayloadKeys.ACTION_BUTTONS)

    return BasicTemplate(
        fields=fields,
        action_buttons=parse_action_buttons(action_buttons_string),
        action_buttons_string=action_buttons_string,
        remind_later_text=source.get_string(PayloadKeys.REMIND_LATER_TEXT),
        remind_later_timestamp=source.get_long(PayloadKeys.REMIND_LATER_TIMESTAMP),
        remind_later_duration=source.get_int(PayloadKeys.REMIND_LATER_DURATION),
        legacy=legacy,
    )
