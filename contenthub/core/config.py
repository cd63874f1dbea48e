"""Application configuration using pydantic settings with structured sections."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./contenthub.db")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me", min_length=8)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7


class StorageSettings(BaseModel):
    root: Path = Field(default=Path("storage"))
    public_base_url: str = "http://localhost:8000"
    max_asset_bytes: int = 10 * 1024 * 1024
    max_document_bytes: int = 50 * 1024 * 1024


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Content Hub"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    storage: StorageSettings = StorageSettings()

    template_dir: Path = Path(__file__).resolve().parent.parent / "web" / "templates"

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def access_token_expire_minutes(self) -> int:
        return self.security.access_token_expire_minutes

    @property
    def media_root(self) -> Path:
        return self.storage.root.resolve()

    @property
    def media_base_url(self) -> str:
        return f"{self.storage.public_base_url.rstrip('/')}/media"


def load_settings(**overrides) -> Settings:
    """Read settings from the environment; the caller owns the returned instance."""
    return Settings(**overrides)
