from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Message settings loaded from environment."""

    # Logging, read by configure_logging
    service_name: str = "send-message"
    log_level: str = "INFO"
    json_logs: bool = True

    # Attachments
    png_compress_level: int = Field(default=6, ge=0, le=9)  # zlib level, always lossless

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
