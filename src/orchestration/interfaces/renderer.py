from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from src.engines.carousel_index_engine import CarouselWindow
from src.orchestration.domain.render_plan import RenderPlan
from src.templates.domain.templates import Template


class Renderer(ABC):
    """
    Populates the platform notification for a built template.
    Returns an opaque platform handle.
    """
    @abstractmethod
    def render(
            self,
            template: Template,
            filtered_items: Sequence[Any],
            indices: Optional[CarouselWindow],
            plan: RenderPlan
    ) -> Any:
        pass
