from typing import Any, Dict, Mapping, Optional

from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.conversions import to_bool, to_int, to_long


class MapSource(PayloadSource):
    """
    Payload delivered as a plain string map (e.g. a push message's data section).
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data = dict(data)

    def get_string(self, key: str) -> Optional[str]:
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> Optional[int]:
        return to_int(self.get_string(key))

    def get_long(self, key: str) -> Optional[int]:
        return to_long(self.get_string(key))

    def get_bool(self, key: str) -> Optional[bool]:
        return to_bool(self.get_string(key))

    def as_dict(self) -> Dict[str, str]:
        return {k: v for k, v in self._data.items() if isinstance(v, str)}
