from dataclasses import dataclass
from typing import Optional

from src.templates.domain.template_type import ActionType


@dataclass(frozen=True)
class CarouselItem:
    image_uri: str
    caption_text: Optional[str] = None
    # Falls back to the template's action uri when absent
    interaction_uri: Optional[str] = None


@dataclass(frozen=True)
class CatalogItem:
    title: str
    body: str
    img: str
    price: str
    uri: str


@dataclass(frozen=True)
class RatingAction:
    type: ActionType
    link: Optional[str] = None


@dataclass(frozen=True)
class MultiIconItem:
    icon_url: str
    action_type: ActionType
    action_uri: Optional[str] = None


@dataclass(frozen=True)
class ActionButton:
    label: str
    link: Optional[str]
    type: ActionType
