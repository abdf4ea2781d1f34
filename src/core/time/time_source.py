from abc import ABC, abstractmethod
from datetime import datetime, timezone


class TimeSource(ABC):
    """
    Clock for the builder and the remind-later handler.
    Templates and engines compare whole epoch seconds, so that is the primitive.
    """
    @abstractmethod
    def epoch_seconds(self) -> int:
        pass

    def now(self) -> datetime:
        return datetime.fromtimestamp(self.epoch_seconds(), tz=timezone.utc)
