import logging
from typing import List, Optional, Tuple

from src.core.domain.notification_errors import InvalidCardinalityError, InvalidFieldValueError
from src.payload.domain.payload_keys import CatalogItemKeys, NavigationKeys, PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.field_extractor import JsonFieldError, json_string, require_json_array
from src.templates.domain.constants import CATALOG_ITEM_COUNT, CATALOG_START_INDEX
from src.templates.domain.items import CatalogItem
from src.templates.domain.templates import ProductCatalogTemplate
from src.templates.services.fields_parser import parse_template_fields

logger = logging.getLogger(__name__)


def parse_catalog_items(raw: Optional[str]) -> Tuple[CatalogItem, ...]:
    """
    Strict: the array must hold exactly three complete items.
    """
    entries = require_json_array(PayloadKeys.CATALOG_ITEMS, raw)
    if len(entries) != CATALOG_ITEM_COUNT:
        raise InvalidCardinalityError("product catalog", CATALOG_ITEM_COUNT, len(entries))

    items: List[CatalogItem] = []
    for index, entry in enumerate(entries):
        try:
            items.append(
                CatalogItem(
                    title=json_string(entry, CatalogItemKeys.TITLE),
                    body=json_string(entry, CatalogItemKeys.BODY),
                    img=json_string(entry, CatalogItemKeys.IMAGE),
                    price=json_string(entry, CatalogItemKeys.PRICE),
                    uri=json_string(entry, CatalogItemKeys.URI),
                )
            )
        except JsonFieldError as e:
            logger.error(f"Failed to parse catalog item at index {index}: {e}")
            raise InvalidFieldValueError(PayloadKeys.CATALOG_ITEMS, f"item {index}: {e}")
    return tuple(items)


def parse_product_catalog(source: PayloadSource) -> ProductCatalogTemplate:
    fields = parse_template_fields(source)
    cta_button_text = source.get_required_string(PayloadKeys.CATALOG_CTA_BUTTON_TEXT)
    cta_button_color = source.get_required_string(PayloadKeys.CATALOG_CTA_BUTTON_COLOR)
    cta_button_text_color = source.get_required_string(PayloadKeys.CATALOG_CTA_BUTTON_TEXT_COLOR)
    cta_button_uri = source.get_required_string(PayloadKeys.CATALOG_CTA_BUTTON_URI)
    display_layout = source.get_required_string(PayloadKeys.CATALOG_LAYOUT)
    raw_items = source.get_required_string(PayloadKeys.CATALOG_ITEMS)
    items = parse_catalog_items(raw_items)

    current_index = source.get_int(NavigationKeys.CATALOG_ITEM_INDEX)
    if current_index is None:
        current_index = CATALOG_START_INDEX
    if not 0 <= current_index < len(items):
        raise InvalidFieldValueError(
            NavigationKeys.CATALOG_ITEM_INDEX, f"index {current_index} is outside the catalog"
        )

    return ProductCatalogTemplate(
        fields=fields,
        cta_button_text=cta_button_text,
        cta_button_color=cta_button_color,
        cta_button_text_color=cta_button_text_color,
        cta_button_uri=cta_button_uri,
        display_layout=display_layout,
        raw_catalog_items=raw_items,
        catalog_items=items,
        current_index=current_index,
    )
