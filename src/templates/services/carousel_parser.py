import logging
from typing import List, Optional, Tuple

from src.payload.domain.payload_keys import CarouselItemKeys, NavigationKeys, PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.field_extractor import (
    JsonFieldError,
    json_opt_string,
    json_string,
    parse_json_array,
)
from src.templates.domain.constants import (
    FILMSTRIP_CAROUSEL_CENTER_INDEX,
    MANUAL_CAROUSEL_START_INDEX,
)
from src.templates.domain.items import CarouselItem
from src.templates.domain.template_type import CarouselLayout, CarouselMode
from src.templates.domain.templates import (
    AutoCarouselTemplate,
    CarouselTemplate,
    ManualCarouselTemplate,
)
from src.templates.services.fields_parser import parse_template_fields

logger = logging.getLogger(__name__)


def parse_carousel_items(raw: Optional[str]) -> Tuple[CarouselItem, ...]:
    """
    Best-effort: malformed JSON yields no items. Parsing stops at the first
    entry without an image, keeping the items read before it.
    """
    entries = parse_json_array(raw)
    if entries is None:
        logger.debug("No carousel items found in the payload")
        return ()

    items: List[CarouselItem] = []
    for entry in entries:
        try:
            image_uri = json_string(entry, CarouselItemKeys.IMAGE)
        except JsonFieldError as e:
            logger.debug(f"Failed to parse carousel items: {e}")
            break
        items.append(
            CarouselItem(
                image_uri=image_uri,
                caption_text=json_opt_string(entry, CarouselItemKeys.TEXT) or None,
                interaction_uri=json_opt_string(entry, CarouselItemKeys.URI) or None,
            )
        )
    return tuple(items)


def default_center_index(carousel_layout: str) -> int:
    if carousel_layout == CarouselLayout.FILMSTRIP:
        return FILMSTRIP_CAROUSEL_CENTER_INDEX
    return MANUAL_CAROUSEL_START_INDEX


def carousel_mode(source: PayloadSource) -> str:
    return source.get_string(PayloadKeys.CAROUSEL_OPERATION_MODE) or CarouselMode.AUTO


def parse_carousel(source: PayloadSource) -> CarouselTemplate:
    """
    `car_mode` "auto" (the default) gives an auto-rotating carousel; any other
    value a user-navigated one.
    """
    fields = parse_template_fields(source)
    carousel_layout = source.get_required_string(PayloadKeys.CAROUSEL_LAYOUT)
    raw_items = source.get_required_string(PayloadKeys.CAROUSEL_ITEMS)
    mode = carousel_mode(source)
    items = parse_carousel_items(raw_items)

    if mode == CarouselMode.AUTO:
        return AutoCarouselTemplate(
            fields=fields,
            carousel_mode=mode,
            carousel_layout=carousel_layout,
            raw_carousel_items=raw_items,
            carousel_items=items,
        )

    center_image_index = default_center_index(carousel_layout)
    navigation_action = None
    if source.is_from_intent and source.action_name:
        navigation_action = source.action_name
        carried = source.get_int(NavigationKeys.CENTER_IMAGE_INDEX)
        if carried is not None:
            center_image_index = carried

    return ManualCarouselTemplate(
        fields=fields,
        carousel_mode=mode,
        carousel_layout=carousel_layout,
        raw_carousel_items=raw_items,
        carousel_items=items,
        center_image_index=center_image_index,
        navigation_action=navigation_action,
    )
