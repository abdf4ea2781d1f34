import logging
from dataclasses import dataclass
from typing import Optional

from src.payload.domain.payload_keys import EventActions
from src.templates.domain.constants import (
    FILMSTRIP_CAROUSEL_CENTER_INDEX,
    MANUAL_CAROUSEL_START_INDEX,
)
from src.templates.domain.template_type import CarouselLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarouselWindow:
    """
    Indices into the list of items available for display.
    Only the filmstrip layout shows left and right; the default layout shows `center`.
    """
    left: int
    center: int
    right: int


def rotate_left(center: int, size: int) -> CarouselWindow:
    new_center = (center - 1 + size) % size
    new_left = (new_center - 1 + size) % size
    logger.debug(
        f"Calculated new indices. New center index is {new_center}, new left index is "
        f"{new_left}, and new right index is {center}."
    )
    return CarouselWindow(left=new_left, center=new_center, right=center)


def rotate_right(center: int, size: int) -> CarouselWindow:
    new_center = (center + 1) % size
    new_right = (new_center + 1) % size
    logger.debug(
        f"Calculated new indices. New center index is {new_center}, new left index is "
        f"{center}, and new right index is {new_right}."
    )
    return CarouselWindow(left=center, center=new_center, right=new_right)


def default_window(carousel_layout: str, size: int) -> CarouselWindow:
    # The filmstrip window is fixed and not reduced modulo size.
    if carousel_layout == CarouselLayout.FILMSTRIP:
        return CarouselWindow(
            left=FILMSTRIP_CAROUSEL_CENTER_INDEX - 1,
            center=FILMSTRIP_CAROUSEL_CENTER_INDEX,
            right=FILMSTRIP_CAROUSEL_CENTER_INDEX + 1,
        )
    return CarouselWindow(
        left=size - 1,
        center=MANUAL_CAROUSEL_START_INDEX,
        right=MANUAL_CAROUSEL_START_INDEX + 1,
    )


def compute_window(
        carousel_layout: str,
        center: int,
        size: int,
        navigation_action: Optional[str] = None
) -> CarouselWindow:
    """
    Window to display for a carousel of `size` available items. Without a navigation
    action the layout default applies; a left action rotates left, any other rotates right.
    """
    if not navigation_action:
        return default_window(carousel_layout, size)
    if navigation_action in EventActions.LEFT_NAVIGATION:
        return rotate_left(center, size)
    return rotate_right(center, size)
