from enum import Enum
from typing import Optional


class TemplateType(Enum):
    """
    Wire discriminator carried in `template_type`.
    """
    BASIC = "basic"
    CAROUSEL = "car"
    ZERO_BEZEL = "zb"
    INPUT_BOX = "input"
    TIMER = "timer"
    PRODUCT_CATALOG = "cat"
    PRODUCT_RATING = "rate"
    MULTI_ICON = "icon"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "TemplateType":
        for member in cls:
            if member.value == value and member is not cls.UNKNOWN:
                return member
        return cls.UNKNOWN


class TemplateKind(Enum):
    """
    Tag of the resolved template variant.
    """
    BASIC = "basic"
    AUTO_CAROUSEL = "auto_carousel"
    MANUAL_CAROUSEL = "manual_carousel"
    ZERO_BEZEL = "zero_bezel"
    INPUT_BOX = "input_box"
    TIMER = "timer"
    PRODUCT_CATALOG = "product_catalog"
    PRODUCT_RATING = "product_rating"
    MULTI_ICON = "multi_icon"


class ActionType(Enum):
    DEEPLINK = "DEEPLINK"
    WEBURL = "WEBURL"
    DISMISS = "DISMISS"
    OPENAPP = "OPENAPP"
    NONE = "NONE"

    @property
    def opens_uri(self) -> bool:
        return self in (ActionType.DEEPLINK, ActionType.WEBURL)


class CarouselLayout:
    DEFAULT = "default"
    FILMSTRIP = "filmstrip"


class CarouselMode:
    AUTO = "auto"
    MANUAL = "manual"


class ZeroBezelStyle(Enum):
    IMAGE = "img"
    TEXT = "txt"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "ZeroBezelStyle":
        for member in cls:
            if member.value == value:
                return member
        return cls.TEXT


class NotificationPriority(Enum):
    PRIORITY_DEFAULT = 0
    PRIORITY_MIN = -2
    PRIORITY_LOW = -1
    PRIORITY_HIGH = 1
    PRIORITY_MAX = 2

    @classmethod
    def from_string(cls, value: Optional[str]) -> "NotificationPriority":
        if value and value in cls.__members__:
            return cls[value]
        return cls.PRIORITY_DEFAULT


class NotificationImportance(Enum):
    MIN = 1
    LOW = 2
    DEFAULT = 3
    HIGH = 4
    MAX = 5

    @classmethod
    def for_priority(cls, priority: NotificationPriority) -> "NotificationImportance":
        return {
            NotificationPriority.PRIORITY_MIN: cls.MIN,
            NotificationPriority.PRIORITY_LOW: cls.LOW,
            NotificationPriority.PRIORITY_DEFAULT: cls.DEFAULT,
            NotificationPriority.PRIORITY_HIGH: cls.HIGH,
            NotificationPriority.PRIORITY_MAX: cls.MAX,
        }[priority]


class NotificationVisibility(Enum):
    VISIBILITY_PRIVATE = 0
    VISIBILITY_PUBLIC = 1
    VISIBILITY_SECRET = -1

    @classmethod
    def from_string(cls, value: Optional[str]) -> "NotificationVisibility":
        if value and value in cls.__members__:
            return cls[value]
        return cls.VISIBILITY_PRIVATE
