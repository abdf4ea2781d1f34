from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from src.templates.domain.items import (
    ActionButton,
    CarouselItem,
    CatalogItem,
    MultiIconItem,
    RatingAction,
)
from src.templates.domain.template_type import (
    ActionType,
    NotificationImportance,
    NotificationPriority,
    NotificationVisibility,
    TemplateKind,
    TemplateType,
    ZeroBezelStyle,
)


@dataclass(frozen=True)
class TemplateFields:
    """
    Fields shared by every template variant.
    Only title, body and payload_version are required.
    """
    title: str
    body: str
    payload_version: str
    expanded_body_text: Optional[str] = None
    ticker: Optional[str] = None
    template_type: TemplateType = TemplateType.UNKNOWN
    image_url: Optional[str] = None
    action_type: ActionType = ActionType.NONE
    action_uri: Optional[str] = None
    small_icon: Optional[str] = None
    large_icon: Optional[str] = None
    title_text_color: Optional[str] = None
    body_text_color: Optional[str] = None
    background_color: Optional[str] = None
    small_icon_color: Optional[str] = None
    tag: Optional[str] = None
    sound: Optional[str] = None
    channel_id: Optional[str] = None
    badge_count: int = 0
    is_sticky: Optional[bool] = None
    priority_string: Optional[str] = None
    visibility_string: Optional[str] = None
    is_from_intent: bool = False

    @property
    def priority(self) -> NotificationPriority:
        return NotificationPriority.from_string(self.priority_string)

    @property
    def importance(self) -> NotificationImportance:
        return NotificationImportance.for_priority(self.priority)

    @property
    def visibility(self) -> NotificationVisibility:
        return NotificationVisibility.from_string(self.visibility_string)


@dataclass(frozen=True)
class BasicTemplate:
    fields: TemplateFields
    action_buttons: Tuple[ActionButton, ...] = ()
    action_buttons_string: Optional[str] = None
    remind_later_text: Optional[str] = None
    remind_later_timestamp: Optional[int] = None
    remind_later_duration: Optional[int] = None
    # Set when the payload's type was not recognised
    legacy: bool = False

    kind: ClassVar[TemplateKind] = TemplateKind.BASIC

    @property
    def offers_remind_later(self) -> bool:
        if self.legacy or self.fields.is_from_intent or not self.remind_later_text:
            return False
        return self.remind_later_timestamp is not None or self.remind_later_duration is not None


@dataclass(frozen=True)
class CarouselTemplate:
    fields: TemplateFields
    carousel_mode: str
    carousel_layout: str
    raw_carousel_items: str
    carousel_items: Tuple[CarouselItem, ...]

    @property
    def image_uris(self) -> Tuple[str, ...]:
        return tuple(item.image_uri for item in self.carousel_items)


@dataclass(frozen=True)
class AutoCarouselTemplate(CarouselTemplate):
    kind: ClassVar[TemplateKind] = TemplateKind.AUTO_CAROUSEL


@dataclass(frozen=True)
class ManualCarouselTemplate(CarouselTemplate):
    center_image_index: int = 0
    navigation_action: Optional[str] = None

    kind: ClassVar[TemplateKind] = TemplateKind.MANUAL_CAROUSEL


@dataclass(frozen=True)
class ZeroBezelTemplate:
    fields: TemplateFields
    collapsed_style: ZeroBezelStyle = ZeroBezelStyle.TEXT

    kind: ClassVar[TemplateKind] = TemplateKind.ZERO_BEZEL


@dataclass(frozen=True)
class InputBoxTemplate:
    fields: TemplateFields
    input_box_receiver_name: str
    input_text_hint: Optional[str] = None
    feedback_text: Optional[str] = None
    feedback_image: Optional[str] = None

    kind: ClassVar[TemplateKind] = TemplateKind.INPUT_BOX


@dataclass(frozen=True)
class TimerContent:
    title: str
    body: Optional[str]
    expanded_body: Optional[str]
    image_url: Optional[str]


@dataclass(frozen=True)
class TimerTemplate:
    fields: TemplateFields
    alternate_title: str
    expiry_time: int
    alternate_body: Optional[str] = None
    alternate_expanded_body: Optional[str] = None
    alternate_image: Optional[str] = None
    timer_color: Optional[str] = None

    kind: ClassVar[TemplateKind] = TemplateKind.TIMER

    def content(self, expired: bool) -> TimerContent:
        if expired:
            return TimerContent(
                title=self.alternate_title,
                body=self.alternate_body,
                expanded_body=self.alternate_expanded_body,
                image_url=self.alternate_image,
            )
        return TimerContent(
            title=self.fields.title,
            body=self.fields.body,
            expanded_body=self.fields.expanded_body_text,
            image_url=self.fields.image_url,
        )


@dataclass(frozen=True)
class ProductCatalogTemplate:
    fields: TemplateFields
    cta_button_text: str
    cta_button_color: str
    cta_button_text_color: str
    cta_button_uri: str
    display_layout: str
    raw_catalog_items: str
    catalog_items: Tuple[CatalogItem, ...]
    current_index: int = 0

    kind: ClassVar[TemplateKind] = TemplateKind.PRODUCT_CATALOG

    @property
    def current_item(self) -> CatalogItem:
        return self.catalog_items[self.current_index]


@dataclass(frozen=True)
class ProductRatingTemplate:
    fields: TemplateFields
    rating_unselected_icon: str
    rating_selected_icon: str
    rating_action_string: str
    rating_actions: Tuple[RatingAction, ...]
    # -1 while nothing is selected
    rating_selected: int = -1

    kind: ClassVar[TemplateKind] = TemplateKind.PRODUCT_RATING

    @property
    def selected_action(self) -> Optional[RatingAction]:
        if self.rating_selected < 0:
            return None
        return self.rating_actions[self.rating_selected]


@dataclass(frozen=True)
class MultiIconTemplate:
    fields: TemplateFields
    items: Tuple[MultiIconItem, ...]
    cancel_icon: str

    kind: ClassVar[TemplateKind] = TemplateKind.MULTI_ICON


Template = Union[
    BasicTemplate,
    AutoCarouselTemplate,
    ManualCarouselTemplate,
    ZeroBezelTemplate,
    InputBoxTemplate,
    TimerTemplate,
    ProductCatalogTemplate,
    ProductRatingTemplate,
    MultiIconTemplate,
]
