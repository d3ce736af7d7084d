from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Uploads
    max_upload_size_bytes: int = 10 * 1024 * 1024  # 10MB
    max_request_size_bytes: int = 10 * 1024 * 1024 + 64 * 1024  # Upload cap + multipart overhead
    allowed_extensions: list[str] = [".pdf", ".docx"]
    upload_dir: Path | None = None  # None = system temp dir
    upload_chunk_size: int = 1024 * 1024

    @field_validator("allowed_extensions", mode="after")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Store extensions lowercased with a leading dot."""
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    # Page estimation for formats without a native page count
    docx_chars_per_page: int = 2500

    # Frontend
    public_dir: Path = BACKEND_DIR / "public"
    cors_origins: list[str] = ["*"]

    # Rate limiting
    rate_limit_enabled: bool = False
    rate_limit_upload_per_minute: int = 30
    rate_limit_storage_uri: str = "memory://"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
