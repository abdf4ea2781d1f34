from dataclasses import dataclass
from typing import Any, Optional, Tuple

from src.engines.carousel_index_engine import CarouselWindow
from src.payload.domain.event_payload import EventPayload
from src.templates.domain.templates import Template


@dataclass(frozen=True)
class BuildResult:
    template: Template
    handle: Any
    channel_id: str
    degraded: bool = False
    window: Optional[CarouselWindow] = None
    events: Tuple[EventPayload, ...] = ()

    def event(self, action: str) -> Optional[EventPayload]:
        for outgoing in self.events:
            if outgoing.action == action:
                return outgoing
        return None
