"""Application settings and configuration management."""
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Tagged-text codec behaviour."""

    # positional: fragment i updates room i; keyed: fragment updates room with same number
    match_policy: Literal["positional", "keyed"] = "positional"
    reject_reserved_text: bool = True

    model_config = SettingsConfigDict(env_prefix="CODEC_")


class StorageSettings(BaseSettings):
    """Where the encoded hotel text is kept."""

    backend: Literal["file", "s3"] = "file"
    path: str = "data/hotel.xml"
    encoding: str = "utf-8"

    model_config = SettingsConfigDict(env_prefix="STORAGE_")


class AWSSettings(BaseSettings):
    """AWS service configuration for the S3 storage backend."""

    region: str = "eu-west-2"
    bucket: str = ""
    key: str = "hotel/hotel.xml"
    endpoint_url: Optional[str] = None  # LocalStack / MinIO
    max_retries: int = 3

    model_config = SettingsConfigDict(env_prefix="AWS_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    codec: CodecSettings = CodecSettings()
    storage: StorageSettings = StorageSettings()
    aws: AWSSettings = AWSSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def validate_storage(self) -> list[str]:
        """Validate required vars for the selected storage backend. Returns list of missing var names."""
        missing = []
        if self.storage.backend == "file":
            if not self.storage.path.strip():
                missing.append("STORAGE_PATH")
        else:
            if not self.aws.bucket.strip():
                missing.append("AWS_BUCKET")
            if not self.aws.key.strip():
                missing.append("AWS_KEY")
        return missing


# Global settings instance
settings = Settings()
