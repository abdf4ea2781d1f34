from src.payload.domain.payload_keys import PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.template_type import ZeroBezelStyle
from src.templates.domain.templates import ZeroBezelTemplate
from src.templates.services.fields_parser import parse_template_fields


def parse_zero_bezel(source: PayloadSource) -> ZeroBezelTemplate:
    return ZeroBezelTemplate(
        fields=parse_template_fields(source),
        collapsed_style=ZeroBezelStyle.from_string(
            source.get_string(PayloadKeys.ZERO_BEZEL_COLLAPSED_STYLE)
        ),
    )
