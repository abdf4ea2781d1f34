import logging
from typing import Any, List, Optional, Tuple

from src.config.settings import settings
from src.core.domain.notification_errors import InvalidCardinalityError
from src.payload.domain.payload_keys import MultiIconItemKeys, PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.field_extractor import (
    json_opt_string,
    optional_non_empty,
    require_json_array,
)
from src.templates.domain.constants import MULTI_ICON_ITEM_RANGE
from src.templates.domain.items import MultiIconItem
from src.templates.domain.template_type import ActionType
from src.templates.domain.templates import MultiIconTemplate
from src.templates.services.fields_parser import parse_template_fields

logger = logging.getLogger(__name__)


def _icon_item_from_entry(entry: Any) -> Optional[MultiIconItem]:
    if not isinstance(entry, dict):
        logger.debug("Icon item is not a JSON object, dropping it")
        return None

    icon_url = json_opt_string(entry, MultiIconItemKeys.IMAGE)
    if not icon_url:
        logger.debug("Image uri is empty, cannot create icon item")
        return None

    raw_type = json_opt_string(entry, MultiIconItemKeys.TYPE)
    if not raw_type:
        action_type = ActionType.NONE
    else:
        try:
            action_type = ActionType(raw_type)
        except ValueError:
            logger.debug(f"Unknown action type {raw_type!r}, dropping icon item")
            return None

    action_uri = None
    if action_type.opens_uri:
        action_uri = json_opt_string(entry, MultiIconItemKeys.URI)
        if not action_uri:
            logger.debug(f"Uri is empty for action type {action_type.value}, dropping icon item")
            return None

    return MultiIconItem(icon_url=icon_url, action_type=action_type, action_uri=action_uri)


def parse_icon_items(raw: Optional[str]) -> Tuple[MultiIconItem, ...]:
    """
    Invalid entries are dropped; the surviving list must still hold 3 to 5 items.
    """
    entries = require_json_array(PayloadKeys.MULTI_ICON_ITEMS, raw)
    items: List[MultiIconItem] = []
    for entry in entries:
        item = _icon_item_from_entry(entry)
        if item is not None:
            items.append(item)

    low, high = MULTI_ICON_ITEM_RANGE
    if not low <= len(items) <= high:
        raise InvalidCardinalityError("multi icon", MULTI_ICON_ITEM_RANGE, len(items))
    return tuple(items)


def parse_multi_icon(source: PayloadSource) -> MultiIconTemplate:
    fields = parse_template_fields(source)
    items = parse_icon_items(source.get_required_string(PayloadKeys.MULTI_ICON_ITEMS))
    cancel_icon = optional_non_empty(source, PayloadKeys.MULTI_ICON_CLOSE_BUTTON)

    return MultiIconTemplate(
        fields=fields,
        items=items,
        cancel_icon=cancel_icon or settings.DEFAULT_CANCEL_ICON,
    )
