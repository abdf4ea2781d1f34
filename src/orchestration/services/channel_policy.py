from src.config.settings import settings
from src.templates.domain.templates import TemplateFields


def resolve_channel_id(fields: TemplateFields) -> str:
    """
    Re-renders triggered by an event go to the silent channel so the user is not
    alerted twice; first deliveries use the payload's channel or the default one.
    """
    if fields.is_from_intent:
        return settings.SILENT_CHANNEL_ID
    return fields.channel_id or settings.DEFAULT_CHANNEL_ID


def channel_name_for(channel_id: str) -> str:
    """Display name used when the renderer has to create the channel."""
    if channel_id == settings.SILENT_CHANNEL_ID:
        return settings.SILENT_CHANNEL_NAME
    if channel_id == settings.DEFAULT_CHANNEL_ID:
        return settings.DEFAULT_CHANNEL_NAME
    return channel_id
