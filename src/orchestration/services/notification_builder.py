import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, Optional, Sequence

from src.config.settings import settings
from src.core.domain.notification_errors import ConstructionFailedError, NotificationError
from src.core.observability.notification_event_logger import NotificationEventLogger
from src.core.time.time_source import TimeSource
from src.engines.carousel_index_engine import CarouselWindow, compute_window
from src.engines.timer_engine import is_expired, remaining
from src.orchestration.domain.build_result import BuildResult
from src.orchestration.domain.render_plan import RenderPlan
from src.orchestration.interfaces.active_notifications import ActiveNotifications
from src.orchestration.interfaces.image_cache import ImageCache
from src.orchestration.interfaces.renderer import Renderer
from src.orchestration.interfaces.scheduler import Scheduler
from src.orchestration.services.channel_policy import channel_name_for, resolve_channel_id
from src.orchestration.services.outgoing_events import carry_forward
from src.payload.domain.payload_keys import EventActions, NavigationKeys, PayloadKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.templates.domain.constants import CAROUSEL_MINIMUM_IMAGE_COUNT, MULTI_ICON_ITEM_RANGE
from src.templates.domain.template_type import CarouselLayout, TemplateKind
from src.templates.domain.templates import (
    AutoCarouselTemplate,
    BasicTemplate,
    CarouselTemplate,
    InputBoxTemplate,
    ManualCarouselTemplate,
    MultiIconTemplate,
    ProductCatalogTemplate,
    ProductRatingTemplate,
    Template,
    TimerTemplate,
    ZeroBezelTemplate,
)
from src.templates.interfaces.template_resolver import TemplateResolver
from src.templates.services.basic_parser import parse_basic

logger = logging.getLogger(__name__)

KindHandler = Callable[[Any, PayloadSource, int], BuildResult]


class NotificationBuilder:
    """
    Resolves a payload into a template, applies the per-variant image and
    display policy, and hands the outcome to the renderer.

    Carousels with too few images degrade to a basic notification. Catalog,
    rating, multi icon and dismissed timers fail with ConstructionFailedError.
    """

    def __init__(
            self,
            resolver: TemplateResolver,
            image_cache: ImageCache,
            scheduler: Scheduler,
            active_notifications: ActiveNotifications,
            renderer: Renderer,
            time_source: TimeSource,
            event_logger: Optional[NotificationEventLogger] = None
    ):
        self.resolver = resolver
        self.image_cache = image_cache
        self.scheduler = scheduler
        self.active_notifications = active_notifications
        self.renderer = renderer
        self.time_source = time_source
        self.event_logger = event_logger or NotificationEventLogger()

        self._handlers: Dict[TemplateKind, KindHandler] = {
            TemplateKind.BASIC: self._build_basic,
            TemplateKind.AUTO_CAROUSEL: self._build_carousel,
            TemplateKind.MANUAL_CAROUSEL: self._build_carousel,
            TemplateKind.ZERO_BEZEL: self._build_zero_bezel,
            TemplateKind.INPUT_BOX: self._build_input_box,
            TemplateKind.TIMER: self._build_timer,
            TemplateKind.PRODUCT_CATALOG: self._build_product_catalog,
            TemplateKind.PRODUCT_RATING: self._build_product_rating,
            TemplateKind.MULTI_ICON: self._build_multi_icon,
        }

    def build(self, source: PayloadSource) -> BuildResult:
        now = self.time_source.epoch_seconds()

        # Collaborators report misses as absent results, so only domain errors reach the except
        try:
            # 1. Resolve & validate
            template = self.resolver.resolve(source, now)

            # 2. Apply the variant's policy and render
            result = self._handlers[template.kind](template, source, now)
        except NotificationError as e:
            self.event_logger.build_failed(e, from_event=source.is_from_intent)
            raise

        self.event_logger.built(
            kind=result.template.kind.value,
            channel_id=result.channel_id,
            degraded=result.degraded,
            actions=(event.action for event in result.events),
        )
        return result

    # --- Helpers ---

    def _resolve_images(self, uris: Iterable[Optional[str]]) -> Dict[str, str]:
        """Soft resolution: URIs that fail are simply absent from the result."""
        wanted = [uri for uri in uris if uri]
        if not wanted:
            return {}
        self.image_cache.resolve(wanted)
        images: Dict[str, str] = {}
        for uri in wanted:
            handle = self.image_cache.get_resolved(uri)
            if handle is not None:
                images[uri] = handle
        return images

    def _require_images(self, uris: Sequence[str], kind: str) -> Dict[str, str]:
        images = self._resolve_images(uris)
        missing = [uri for uri in uris if uri not in images]
        if missing:
            raise ConstructionFailedError(
                f"{kind} requires all images to be downloaded, failed for {len(missing)} of {len(uris)}."
            )
        return images

    def _finish(
            self,
            template: Template,
            plan: RenderPlan,
            filtered_items: Sequence[Any] = (),
            window: Optional[CarouselWindow] = None,
            degraded: bool = False
    ) -> BuildResult:
        plan = replace(plan, channel_name=channel_name_for(plan.channel_id))
        handle = self.renderer.render(template, filtered_items, window, plan)
        return BuildResult(
            template=template,
            handle=handle,
            channel_id=plan.channel_id,
            degraded=degraded,
            window=window,
            events=plan.events,
        )

    # --- Variants ---

    def _build_basic(
            self,
            template: BasicTemplate,
            source: PayloadSource,
            now: int,
            degraded: bool = False
    ) -> BuildResult:
        channel_id = resolve_channel_id(template.fields)
        events = ()
        if template.offers_remind_later:
            events = (carry_forward(source, EventActions.REMIND_LATER_CLICKED, channel_id),)

        plan = RenderPlan(
            channel_id=channel_id,
            images=self._resolve_images([template.fields.image_url]),
            events=events,
            offers_remind_later=template.offers_remind_later,
            legacy=template.legacy,
        )
        return self._finish(template, plan, template.action_buttons, degraded=degraded)

    def _build_carousel(self, template: CarouselTemplate, source: PayloadSource, now: int) -> BuildResult:
        images = self._resolve_images(template.image_uris)
        filtered = tuple(item for item in template.carousel_items if item.image_uri in images)

        if len(filtered) < CAROUSEL_MINIMUM_IMAGE_COUNT:
            logger.warning(
                f"Only {len(filtered)} of {len(template.carousel_items)} carousel images were downloaded, "
                f"falling back to a basic notification."
            )
            return self._build_basic(parse_basic(source), source, now, degraded=True)

        channel_id = resolve_channel_id(template.fields)
        if isinstance(template, AutoCarouselTemplate):
            plan = RenderPlan(channel_id=channel_id, images=images)
            return self._finish(template, plan, filtered)

        return self._build_manual_carousel(template, source, channel_id, images, filtered)

    def _build_manual_carousel(
            self,
            template: ManualCarouselTemplate,
            source: PayloadSource,
            channel_id: str,
            images: Dict[str, str],
            filtered: Sequence[Any]
    ) -> BuildResult:
        window = compute_window(
            template.carousel_layout,
            template.center_image_index,
            len(filtered),
            template.navigation_action,
        )

        if template.carousel_layout == CarouselLayout.FILMSTRIP:
            left_action = EventActions.FILMSTRIP_LEFT_CLICKED
            right_action = EventActions.FILMSTRIP_RIGHT_CLICKED
        else:
            left_action = EventActions.MANUAL_CAROUSEL_LEFT_CLICKED
            right_action = EventActions.MANUAL_CAROUSEL_RIGHT_CLICKED

        state = {NavigationKeys.CENTER_IMAGE_INDEX: window.center}
        events = (
            carry_forward(source, left_action, channel_id, **state),
            carry_forward(source, right_action, channel_id, **state),
        )
        plan = RenderPlan(channel_id=channel_id, images=images, events=events)
        return self._finish(template, plan, filtered, window)

    def _build_zero_bezel(self, template: ZeroBezelTemplate, source: PayloadSource, now: int) -> BuildResult:
        plan = RenderPlan(
            channel_id=resolve_channel_id(template.fields),
            images=self._resolve_images([template.fields.image_url]),
        )
        return self._finish(template, plan)

    def _build_input_box(self, template: InputBoxTemplate, source: PayloadSource, now: int) -> BuildResult:
        channel_id = resolve_channel_id(template.fields)

        # A reply has already been received: show the feedback instead of the input
        if template.fields.is_from_intent:
            plan = RenderPlan(
                channel_id=channel_id,
                images=self._resolve_images([template.feedback_image]),
            )
            return self._finish(template, plan)

        plan = RenderPlan(
            channel_id=channel_id,
            images=self._resolve_images([template.fields.image_url]),
            events=(carry_forward(source, EventActions.INPUT_RECEIVED, channel_id),),
            input_hint=template.input_text_hint or settings.INPUT_BOX_DEFAULT_REPLY_TEXT,
        )
        return self._finish(template, plan)

    def _build_timer(self, template: TimerTemplate, source: PayloadSource, now: int) -> BuildResult:
        channel_id = resolve_channel_id(template.fields)
        expired = is_expired(template.expiry_time, now)

        if not expired:
            content = template.content(expired=False)
            # The expiry re-render must see an absolute end time, not a fresh duration
            expiry_event = carry_forward(
                source,
                EventActions.TIMER_EXPIRED,
                channel_id,
                without=(PayloadKeys.TIMER_DURATION,),
                **{PayloadKeys.TIMER_END_TIME: template.expiry_time},
            )
            # Expiry is strict, so fire one second after the end time
            self.scheduler.schedule(expiry_event, template.expiry_time + 1)
            plan = RenderPlan(
                channel_id=channel_id,
                images=self._resolve_images([content.image_url]),
                timer_content=content,
                timer_remaining=remaining(template.expiry_time, now),
            )
            return self._finish(template, plan)

        if template.fields.is_from_intent:
            tag = template.fields.tag
            if tag is None or not self.active_notifications.is_displayed(tag):
                raise ConstructionFailedError(
                    "Timer notification is no longer displayed, not showing the expired view."
                )

        content = template.content(expired=True)
        plan = RenderPlan(
            channel_id=channel_id,
            images=self._resolve_images([content.image_url]),
            timer_content=content,
        )
        return self._finish(template, plan)

    def _build_product_catalog(
            self,
            template: ProductCatalogTemplate,
            source: PayloadSource,
            now: int
    ) -> BuildResult:
        images = self._require_images([item.img for item in template.catalog_items], "Product catalog")
        channel_id = resolve_channel_id(template.fields)

        events = tuple(
            carry_forward(
                source,
                EventActions.CATALOG_THUMBNAIL_CLICKED,
                channel_id,
                **{NavigationKeys.CATALOG_ITEM_INDEX: index},
            )
            for index in range(len(template.catalog_items))
        )
        plan = RenderPlan(channel_id=channel_id, images=images, events=events)
        return self._finish(template, plan, template.catalog_items)

    def _build_product_rating(
            self,
            template: ProductRatingTemplate,
            source: PayloadSource,
            now: int
    ) -> BuildResult:
        images = self._require_images(
            [template.rating_unselected_icon, template.rating_selected_icon],
            "Product rating",
        )
        channel_id = resolve_channel_id(template.fields)

        events = tuple(
            carry_forward(
                source,
                EventActions.RATING_ICON_CLICKED,
                channel_id,
                **{NavigationKeys.RATING_SELECTED: index},
            )
            for index in range(len(template.rating_actions))
        )
        plan = RenderPlan(
            channel_id=channel_id,
            images=images,
            events=events,
            confirm_action=template.selected_action,
        )
        return self._finish(template, plan, template.rating_actions)

    def _build_multi_icon(self, template: MultiIconTemplate, source: PayloadSource, now: int) -> BuildResult:
        images = self._resolve_images([item.icon_url for item in template.items])
        bound = tuple(item for item in template.items if item.icon_url in images)

        minimum = MULTI_ICON_ITEM_RANGE[0]
        if len(bound) < minimum:
            raise ConstructionFailedError(
                f"Multi icon requires at least {minimum} icons, only {len(bound)} were downloaded."
            )

        plan = RenderPlan(channel_id=resolve_channel_id(template.fields), images=images)
        return self._finish(template, plan, bound)
