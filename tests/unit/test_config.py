import pytest
from pydantic import ValidationError

from send_message.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PNG_COMPRESS_LEVEL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("JSON_LOGS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.png_compress_level == 6
        assert settings.log_level == "INFO"
        assert settings.json_logs is True

    def test_loaded_from_environment(self, monkeypatch):
        monkeypatch.setenv("PNG_COMPRESS_LEVEL", "9")
        monkeypatch.setenv("SERVICE_NAME", "mms-sender")

        settings = Settings(_env_file=None)

        assert settings.png_compress_level == 9
        assert settings.service_name == "mms-sender"

    def test_compress_level_out_of_range(self, monkeypatch):
        monkeypatch.setenv("PNG_COMPRESS_LEVEL", "10")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
