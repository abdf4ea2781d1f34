class PayloadKeys:
    """
    Wire keys of the inbound notification payload.
    """
    TEMPLATE_TYPE = "template_type"
    TITLE = "title"
    BODY = "body"
    VERSION = "version"
    SOUND = "sound"
    BADGE_COUNT = "n_count"
    VISIBILITY = "n_visibility"
    PRIORITY = "n_priority"
    CHANNEL_ID = "channel_id"
    LEGACY_SMALL_ICON = "icon"
    SMALL_ICON = "small_icon"
    LARGE_ICON = "large_icon"
    IMAGE_URL = "image"
    TAG = "tag"
    TICKER = "ticker"
    STICKY = "sticky"
    ACTION_TYPE = "a_type"
    ACTION_URI = "uri"
    ACTION_BUTTONS = "act"
    EXPANDED_BODY_TEXT = "body_ex"
    BODY_TEXT_COLOR = "clr_body"
    TITLE_TEXT_COLOR = "clr_title"
    SMALL_ICON_COLOR = "clr_icon"
    BACKGROUND_COLOR = "clr_bg"

    REMIND_LATER_TEXT = "rem_txt"
    REMIND_LATER_TIMESTAMP = "rem_ts"
    REMIND_LATER_DURATION = "rem_sec"

    CAROUSEL_LAYOUT = "car_layout"
    CAROUSEL_ITEMS = "items"
    CAROUSEL_OPERATION_MODE = "car_mode"

    INPUT_BOX_HINT = "input_txt"
    INPUT_BOX_FEEDBACK_TEXT = "feedback_txt"
    INPUT_BOX_FEEDBACK_IMAGE = "feedback_img"
    INPUT_BOX_RECEIVER_NAME = "input_receiver"

    ZERO_BEZEL_COLLAPSED_STYLE = "col_style"

    CATALOG_CTA_BUTTON_TEXT = "cta_txt"
    CATALOG_CTA_BUTTON_COLOR = "cta_clr"
    CATALOG_CTA_BUTTON_TEXT_COLOR = "cta_txt_clr"
    CATALOG_CTA_BUTTON_URI = "cta_uri"
    CATALOG_LAYOUT = "display"
    CATALOG_ITEMS = "items"

    RATING_UNSELECTED_ICON = "rate_unselected_icon"
    RATING_SELECTED_ICON = "rate_selected_icon"
    RATING_ACTIONS = "rate_act"

    MULTI_ICON_ITEMS = "items"
    MULTI_ICON_CLOSE_BUTTON = "cancel_image"

    TIMER_ALTERNATE_TITLE = "title_alt"
    TIMER_ALTERNATE_BODY = "body_alt"
    TIMER_ALTERNATE_EXPANDED_BODY = "body_ex_alt"
    TIMER_ALTERNATE_IMAGE = "image_alt"
    TIMER_COLOR = "clr_tmr"
    TIMER_DURATION = "tmr_dur"
    TIMER_END_TIME = "tmr_end"


class NavigationKeys:
    """
    State carried forward from one event to the next.
    """
    CENTER_IMAGE_INDEX = "centerImageIndex"
    CATALOG_ITEM_INDEX = "catalogItemIndex"
    RATING_SELECTED = "ratingSelected"


class EventActions:
    FILMSTRIP_LEFT_CLICKED = "filmstrip_left"
    FILMSTRIP_RIGHT_CLICKED = "filmstrip_right"
    MANUAL_CAROUSEL_LEFT_CLICKED = "manual_left"
    MANUAL_CAROUSEL_RIGHT_CLICKED = "manual_right"
    REMIND_LATER_CLICKED = "remind_clicked"
    INPUT_RECEIVED = "input_received"
    CATALOG_THUMBNAIL_CLICKED = "thumbnail_clicked"
    RATING_ICON_CLICKED = "rating_icon_clicked"
    SCHEDULED_NOTIFICATION_BROADCAST = "scheduled_notification_broadcast"
    TIMER_EXPIRED = "timer_expired"

    LEFT_NAVIGATION = (MANUAL_CAROUSEL_LEFT_CLICKED, FILMSTRIP_LEFT_CLICKED)


class CarouselItemKeys:
    IMAGE = "img"
    TEXT = "txt"
    URI = "uri"


class CatalogItemKeys:
    TITLE = "title"
    BODY = "body"
    IMAGE = "img"
    PRICE = "price"
    URI = "uri"


class ActionButtonKeys:
    LABEL = "label"
    URI = "uri"
    TYPE = "type"


class RatingActionKeys:
    URI = "uri"
    TYPE = "type"


class MultiIconItemKeys:
    IMAGE = "img"
    URI = "uri"
    TYPE = "type"
