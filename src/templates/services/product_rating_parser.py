import logging
from typing import Any, List, Optional, Tuple

from src.core.domain.notification_errors import InvalidCardinalityError, InvalidFieldValueError
from src.payload.domain.payload_keys import NavigationKeys, PayloadKeys, RatingActionKeys
from src.payload.interfaces.payload_source import PayloadSource
from src.payload.services.field_extractor import JsonFieldError, json_string, require_json_array
from src.templates.domain.constants import RATING_ACTION_RANGE, RATING_UNSELECTED
from src.templates.domain.items import RatingAction
from src.templates.domain.template_type import ActionType
from src.templates.domain.templates import ProductRatingTemplate
from src.templates.services.fields_parser import parse_template_fields

logger = logging.getLogger(__name__)


def _rating_action_from_entry(entry: Any) -> RatingAction:
    raw_type = json_string(entry, RatingActionKeys.TYPE)
    try:
        action_type = ActionType(raw_type)
    except ValueError:
        raise JsonFieldError(f"Unknown rating action type {raw_type!r}")
    link = None
    if action_type.opens_uri:
        link = json_string(entry, RatingActionKeys.URI)
    return RatingAction(type=action_type, link=link)


def parse_rating_actions(raw: Optional[str]) -> Tuple[RatingAction, ...]:
    """
    Strict: any malformed action invalidates the whole list.
    """
    entries = require_json_array(PayloadKeys.RATING_ACTIONS, raw)
    actions: List[RatingAction] = []
    for index, entry in enumerate(entries):
        try:
            actions.append(_rating_action_from_entry(entry))
        except JsonFieldError as e:
            logger.warning(f"Invalid rating action at index {index}: {e}")
            raise InvalidFieldValueError(PayloadKeys.RATING_ACTIONS, f"action {index}: {e}")

    low, high = RATING_ACTION_RANGE
    if not low <= len(actions) <= high:
        raise InvalidCardinalityError("product rating", RATING_ACTION_RANGE, len(actions))
    return tuple(actions)


def parse_product_rating(source: PayloadSource) -> ProductRatingTemplate:
    fields = parse_template_fields(source)
    unselected_icon = source.get_required_string(PayloadKeys.RATING_UNSELECTED_ICON)
    selected_icon = source.get_required_string(PayloadKeys.RATING_SELECTED_ICON)
    action_string = source.get_required_string(PayloadKeys.RATING_ACTIONS)
    actions = parse_rating_actions(action_string)

    rating_selected = source.get_int(NavigationKeys.RATING_SELECTED)
    if rating_selected is None:
        rating_selected = RATING_UNSELECTED
    if not RATING_UNSELECTED <= rating_selected < len(actions):
        raise InvalidFieldValueError(
            NavigationKeys.RATING_SELECTED, f"selection {rating_selected} is outside the rating range"
        )

    return ProductRatingTemplate(
        fields=fields,
        rating_unselected_icon=unselected_icon,
        rating_selected_icon=selected_icon,
        rating_action_string=action_string,
        rating_actions=actions,
        rating_selected=rating_selected,
    )
