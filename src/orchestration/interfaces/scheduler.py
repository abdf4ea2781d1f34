from abc import ABC, abstractmethod

from src.payload.domain.event_payload import EventPayload


class Scheduler(ABC):
    """
    Delivers an event payload back to the builder at a later time.
    """
    @abstractmethod
    def schedule(self, event: EventPayload, trigger_at: int) -> None:
        pass
