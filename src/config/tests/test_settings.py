from src.config.settings import Settings


def test_channel_defaults():
    settings = Settings()
    assert settings.DEFAULT_CHANNEL_ID == "PushTemplatesChannel"
    assert settings.SILENT_CHANNEL_ID == "PushTemplatesSilentChannel"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_CHANNEL_ID", "marketing")
    monkeypatch.setenv("IMAGE_DOWNLOAD_TIMEOUT", "3")

    settings = Settings()

    assert settings.DEFAULT_CHANNEL_ID == "marketing"
    assert settings.IMAGE_DOWNLOAD_TIMEOUT == 3
