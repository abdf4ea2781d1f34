import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    IMAGE_CACHE_DIR: str = os.getenv(
        "IMAGE_CACHE_DIR",
        os.path.join(os.path.expanduser("~"), ".cache", "pushtemplates", "pushimagecache")
    )
    IMAGE_DOWNLOAD_TIMEOUT: int = 10  # Seconds per request
    IMAGE_DOWNLOAD_MAX_RETRIES: int = 3

    # Channels
    DEFAULT_CHANNEL_ID: str = "PushTemplatesChannel"
    DEFAULT_CHANNEL_NAME: str = "General Notifications"
    SILENT_CHANNEL_ID: str = "PushTemplatesSilentChannel"
    SILENT_CHANNEL_NAME: str = "Silent Notifications"

    # Template defaults
    INPUT_BOX_DEFAULT_REPLY_TEXT: str = "Reply"
    DEFAULT_CANCEL_ICON: str = "cross"


settings = Settings()
