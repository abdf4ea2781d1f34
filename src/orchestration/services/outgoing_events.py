from typing import Dict, Iterable

from src.payload.domain.event_payload import EventPayload
from src.payload.domain.payload_keys import PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource


def carry_forward(
        source: PayloadSource,
        action: str,
        channel_id: str,
        without: Iterable[str] = (),
        **state: int
) -> EventPayload:
    """
    Builds the event fired by an interaction. The raw payload travels unchanged,
    with the navigation state for the next render added on top.
    """
    extras: Dict[str, str] = source.as_dict()
    # Keep the channel of the first delivery across re-renders
    extras[PayloadKeys.CHANNEL_ID] = extras.get(PayloadKeys.CHANNEL_ID) or channel_id
    for key in without:
        extras.pop(key, None)
    for key, value in state.items():
        extras[key] = str(value)
    return EventPayload(action=action, extras=extras)
