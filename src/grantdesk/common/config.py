"""Grantdesk configuration via pydantic-settings."""

import pathlib
import warnings
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = pathlib.Path(__file__).resolve().parent.parent


class GrantdeskSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GRANTDESK_")

    environment: str = "development"

    # API
    api_title: str = "Grantdesk"
    api_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Logging. An empty log_file keeps output on stdout only.
    log_level: str = "INFO"
    log_file: str = "logs.log"

    # Content
    videos_dir: str = "."
    templates_dir: str = ""

    @property
    def templates_path(self) -> pathlib.Path:
        """Return the template directory, defaulting to the bundled templates."""
        if self.templates_dir:
            return pathlib.Path(self.templates_dir)
        return _PACKAGE_DIR / "portal" / "templates"

    @property
    def videos_path(self) -> pathlib.Path:
        return pathlib.Path(self.videos_dir)

    def validate_paths(self) -> None:
        """Warn if the video catalog directory does not exist."""
        if not self.videos_path.is_dir():
            warnings.warn(
                f"GRANTDESK_VIDEOS_DIR points to a missing directory: {self.videos_dir!r}. "
                "Video pages will answer 400 until catalog files are available.",
                UserWarning,
                stacklevel=2,
            )


@lru_cache
def get_settings() -> GrantdeskSettings:
    settings = GrantdeskSettings()
    settings.validate_paths()
    return settings
