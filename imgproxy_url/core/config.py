"""
Application configuration using Pydantic Settings
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

from imgproxy_url.application.url.options import SignatureOptions


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Settings
    api_title: str = "imgproxy URL API"
    api_description: str = "Builds and signs imgproxy processing URLs"
    api_version: str = "1.0.0"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: Optional[str] = None  # enables a rotating file handler when set

    # imgproxy Settings
    imgproxy_base_url: Optional[str] = None
    imgproxy_key: str = ""  # hex encoded
    imgproxy_salt: str = ""  # hex encoded
    imgproxy_signature_size: int = 32
    imgproxy_plain_path: bool = False
    """
    imgproxy configuration, named after imgproxy's own IMGPROXY_* variables.
    imgproxy_base_url: prefix of generated URLs, e.g. https://img.example.com
    imgproxy_key / imgproxy_salt: signing secrets, hex encoded
    imgproxy_signature_size: bytes of the digest kept before encoding
    imgproxy_plain_path: default locator mode for generated URLs
    """

    # Security Settings
    api_key: Optional[str] = None  # required in X-API-Key for /urls when set
    max_requests_per_minute: int = 120
    rate_limit_period: int = 60  # seconds

    @field_validator("imgproxy_base_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        """Normalize the base URL so joining never yields a double slash.

        Example:
            >>> strip_trailing_slash("https://img.example.com/")
            'https://img.example.com'
        """
        if v is None:
            return v
        v = v.strip().rstrip("/")
        return v or None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def signing_enabled(self) -> bool:
        return bool(self.imgproxy_key and self.imgproxy_salt)

    @property
    def signature_options(self) -> Optional[SignatureOptions]:
        """Signature settings for ``build()``, or None when signing is off."""
        if not self.signing_enabled:
            return None
        return SignatureOptions(
            key=self.imgproxy_key,
            salt=self.imgproxy_salt,
            size=self.imgproxy_signature_size,
        )


# Global settings instance
settings = Settings()
