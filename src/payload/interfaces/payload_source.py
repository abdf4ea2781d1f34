from abc import ABC, abstractmethod
from typing import Dict, Optional

from src.core.domain.notification_errors import MissingRequiredFieldError


class PayloadSource(ABC):
    """
    Uniform typed reads over an inbound notification payload.
    Every getter returns None when the key is absent or the value cannot be converted;
    none of them raise. Only `get_required_string` fails.
    """

    @abstractmethod
    def get_string(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_int(self, key: str) -> Optional[int]:
        pass

    @abstractmethod
    def get_long(self, key: str) -> Optional[int]:
        pass

    @abstractmethod
    def get_bool(self, key: str) -> Optional[bool]:
        pass

    @abstractmethod
    def as_dict(self) -> Dict[str, str]:
        """String entries of the payload, used to carry it forward unchanged."""
        pass

    @property
    def is_from_intent(self) -> bool:
        return False

    @property
    def action_name(self) -> Optional[str]:
        return None

    def get_required_string(self, key: str) -> str:
        value = self.get_string(key)
        if value is None:
            raise MissingRequiredFieldError(key)
        return value
