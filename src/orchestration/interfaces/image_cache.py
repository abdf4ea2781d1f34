from abc import ABC, abstractmethod
from typing import Optional, Sequence


class ImageCache(ABC):
    """
    Resolves image URIs to locally usable asset handles.
    May block on network I/O; any retry policy lives in the implementation.
    """

    @abstractmethod
    def resolve(self, uris: Sequence[str]) -> int:
        """
        Fetches the given URIs, returning how many are now available.
        Network and storage failures leave a URI unresolved and are never raised.
        """
        pass

    @abstractmethod
    def get_resolved(self, uri: str) -> Optional[str]:
        pass

    @abstractmethod
    def cache_location(self) -> Optional[str]:
        pass
