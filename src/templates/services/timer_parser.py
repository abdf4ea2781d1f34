from src.core.domain.notification_errors import MissingRequiredFieldError
from src.engines.timer_engine import compute_expiry
from src.payload.domain.payload_keys import PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.templates import TimerTemplate
from src.templates.services.fields_parser import parse_template_fields


def parse_timer(source: PayloadSource, now: int) -> TimerTemplate:
    """
    `now` is epoch seconds; a duration is measured from it.
    """
    fields = parse_template_fields(source)
    alternate_title = source.get_required_string(PayloadKeys.TIMER_ALTERNATE_TITLE)

    expiry_time = compute_expiry(
        duration=source.get_long(PayloadKeys.TIMER_DURATION),
        end_timestamp=source.get_long(PayloadKeys.TIMER_END_TIME),
        now=now,
    )
    if expiry_time is None:
        raise MissingRequiredFieldError(f"{PayloadKeys.TIMER_DURATION} or {PayloadKeys.TIMER_END_TIME}")

    return TimerTemplate(
        fields=fields,
        alternate_title=alternate_title,
        expiry_time=expiry_time,
        alternate_body=source.get_string(PayloadKeys.TIMER_ALTERNATE_BODY),
        alternate_expanded_body=source.get_string(PayloadKeys.TIMER_ALTERNATE_EXPANDED_BODY),
        alternate_image=source.get_string(PayloadKeys.TIMER_ALTERNATE_IMAGE),
        timer_color=source.get_string(PayloadKeys.TIMER_COLOR),
    )
