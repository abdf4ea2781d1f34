CAROUSEL_MINIMUM_IMAGE_COUNT = 3
MANUAL_CAROUSEL_START_INDEX = 0
FILMSTRIP_CAROUSEL_CENTER_INDEX = 1

CATALOG_ITEM_COUNT = 3
CATALOG_START_INDEX = 0
CATALOG_VERTICAL_LAYOUT = "vertical"

RATING_ACTION_RANGE = (3, 5)
RATING_UNSELECTED = -1

MULTI_ICON_ITEM_RANGE = (3, 5)
