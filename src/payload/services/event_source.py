from typing import Any, Dict, Mapping, Optional

from src.payload.domain.event_payload import EventPayload
from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.conversions import to_bool, to_int, to_long


class EventSource(PayloadSource):
    """
    Payload re-delivered through a platform event (button press, navigation, scheduled
    delivery). Values are read from the event's extras; non-string extras read as absent.
    """

    def __init__(self, extras: Mapping[str, Any], action_name: Optional[str] = None):
        self._extras = dict(extras)
        self._action_name = action_name

    @classmethod
    def from_event(cls, event: EventPayload) -> "EventSource":
        return cls(event.extras, event.action)

    @property
    def is_from_intent(self) -> bool:
        return True

    @property
    def action_name(self) -> Optional[str]:
        return self._action_name

    def get_string(self, key: str) -> Optional[str]:
        value = self._extras.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> Optional[int]:
        return to_int(self.get_string(key))

    def get_long(self, key: str) -> Optional[int]:
        return to_long(self.get_string(key))

    def get_bool(self, key: str) -> Optional[bool]:
        return to_bool(self.get_string(key))

    def as_dict(self) -> Dict[str, str]:
        return {k: v for k, v in self._extras.items() if isinstance(v, str)}
