from abc import ABC, abstractmethod

from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.templates import Template


class TemplateResolver(ABC):
    """
    Turns one inbound payload into exactly one validated template variant.
    Validation errors from the variant parsers propagate to the caller.
    """
    @abstractmethod
    def resolve(self, source: PayloadSource, now: int) -> Template:
        pass
