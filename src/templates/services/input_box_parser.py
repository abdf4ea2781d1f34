from src.payload.domain.payload_keys import PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.templates import InputBoxTemplate
from src.templates.services.fields_parser import parse_template_fields


def parse_input_box(source: PayloadSource) -> InputBoxTemplate:
    fields = parse_template_fields(source)
    return InputBoxTemplate(
        fields=fields,
        input_box_receiver_name=source.get_required_string(PayloadKeys.INPUT_BOX_RECEIVER_NAME),
        input_text_hint=source.get_string(PayloadKeys.INPUT_BOX_HINT),
        feedback_text=source.get_string(PayloadKeys.INPUT_BOX_FEEDBACK_TEXT),
        feedback_image=source.get_string(PayloadKeys.INPUT_BOX_FEEDBACK_IMAGE),
    )
