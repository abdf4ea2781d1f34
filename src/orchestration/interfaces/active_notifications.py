from abc import ABC, abstractmethod


class ActiveNotifications(ABC):
    """
    View of the notifications currently shown to the user, keyed by tag.
    """

    @abstractmethod
    def is_displayed(self, tag: str) -> bool:
        pass

    @abstractmethod
    def cancel(self, tag: str) -> None:
        pass
