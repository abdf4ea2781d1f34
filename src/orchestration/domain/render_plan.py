from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from src.payload.domain.event_payload import EventPayload
from src.templates.domain.items import RatingAction
from src.templates.domain.templates import TimerContent


@dataclass(frozen=True)
class RenderPlan:
    """
    Everything the renderer needs beyond the template itself.
    `images` maps each resolved URI to its asset handle.
    """
    channel_id: str
    channel_name: Optional[str] = None
    images: Dict[str, str] = field(default_factory=dict)
    events: Tuple[EventPayload, ...] = ()
    offers_remind_later: bool = False
    legacy: bool = False
    # Input box
    input_hint: Optional[str] = None
    # Timer
    timer_content: Optional[TimerContent] = None
    timer_remaining: Optional[int] = None
    # Product rating
    confirm_action: Optional[RatingAction] = None
