import logging
from typing import Callable, Dict

from src.payload.domain.payload_keys import PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.template_type import TemplateType
from src.templates.domain.templates import Template
from src.templates.interfaces.template_resolver import TemplateResolver
from src.templates.services.basic_parser import parse_basic
from src.templates.services.carousel_parser import parse_carousel
from src.templates.services.input_box_parser import parse_input_box
from src.templates.services.multi_icon_parser import parse_multi_icon
from src.templates.services.product_catalog_parser import parse_product_catalog
from src.templates.services.product_rating_parser import parse_product_rating
from src.templates.services.timer_parser import parse_timer
from src.templates.services.zero_bezel_parser import parse_zero_bezel

logger = logging.getLogger(__name__)

VariantParser = Callable[[PayloadSource, int], Template]


class StandardTemplateResolver(TemplateResolver):
    """
    Dispatches on `template_type`. Unrecognised or missing types resolve to a
    legacy basic template, so the type string alone never fails resolution.
    """

    def __init__(self):
        self._parsers: Dict[TemplateType, VariantParser] = {
            TemplateType.BASIC: lambda source, now: parse_basic(source),
            TemplateType.CAROUSEL: lambda source, now: parse_carousel(source),
            TemplateType.ZERO_BEZEL: lambda source, now: parse_zero_bezel(source),
            TemplateType.INPUT_BOX: lambda source, now: parse_input_box(source),
            TemplateType.TIMER: parse_timer,
            TemplateType.PRODUCT_CATALOG: lambda source, now: parse_product_catalog(source),
            TemplateType.PRODUCT_RATING: lambda source, now: parse_product_rating(source),
            TemplateType.MULTI_ICON: lambda source, now: parse_multi_icon(source),
            TemplateType.UNKNOWN: lambda source, now: parse_basic(source, legacy=True),
        }

    def resolve(self, source: PayloadSource, now: int) -> Template:
        raw_type = source.get_string(PayloadKeys.TEMPLATE_TYPE)
        template_type = TemplateType.from_string(raw_type)
        if template_type is TemplateType.UNKNOWN:
            logger.debug(f"Unrecognised template type {raw_type!r}, using legacy rendering")

        template = self._parsers[template_type](source, now)
        logger.debug(f"Resolved template type {template_type.value} to {template.kind.value}")
        return template
