from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from src.engines.carousel_index_engine import CarouselWindow
from src.orchestration.domain.render_plan import RenderPlan
from src.orchestration.interfaces.active_notifications import ActiveNotifications
from src.orchestration.interfaces.image_cache import ImageCache
from src.orchestration.interfaces.renderer import Renderer
from src.orchestration.interfaces.scheduler import Scheduler
from src.payload.domain.event_payload import EventPayload
from src.templates.domain.templates import Template


class StaticImageCache(ImageCache):
    """Resolves exactly the URIs it was given; everything else misses."""

    def __init__(self, available: Iterable[str] = (), location: Optional[str] = None):
        self.available: Set[str] = set(available)
        self.location = location

    def resolve(self, uris: Sequence[str]) -> int:
        return sum(1 for uri in uris if uri in self.available)

    def get_resolved(self, uri: str) -> Optional[str]:
        if uri in self.available:
            return f"asset://{uri}"
        return None

    def cache_location(self) -> Optional[str]:
        return self.location


class InMemoryScheduler(Scheduler):
    def __init__(self):
        self.scheduled: List[Tuple[EventPayload, int]] = []

    def schedule(self, event: EventPayload, trigger_at: int) -> None:
        self.scheduled.append((event, trigger_at))

    def due(self, now: int) -> List[EventPayload]:
        """Removes and returns the events whose trigger time has been reached."""
        ready = [event for event, trigger_at in self.scheduled if trigger_at <= now]
        self.scheduled = [(event, at) for event, at in self.scheduled if at > now]
        return ready


class InMemoryActiveNotifications(ActiveNotifications):
    def __init__(self, displayed: Iterable[str] = ()):
        self.displayed: Set[str] = set(displayed)
        self.cancelled: List[str] = []

    def is_displayed(self, tag: str) -> bool:
        return tag in self.displayed

    def cancel(self, tag: str) -> None:
        self.cancelled.append(tag)
        self.displayed.discard(tag)


class RecordingRenderer(Renderer):
    """Keeps every render call; the handle is the call's position."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []

    def render(
            self,
            template: Template,
            filtered_items: Sequence[Any],
            indices: Optional[CarouselWindow],
            plan: RenderPlan
    ) -> Any:
        self.calls.append({
            "template": template,
            "filtered_items": tuple(filtered_items),
            "indices": indices,
            "plan": plan,
        })
        return len(self.calls) - 1

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]
