from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "0.1.0"
DEFAULT_LOG_LEVEL = "WARNING"

CONFIG_FILE = Path.home() / ".config" / "smart-directory" / "config.env"

DEFAULT_FORMAT = "[$path]($style)[$read_only]($read_only_style) "
DEFAULT_REPO_ROOT_FORMAT = (
    "[$before_root_path]($before_repo_root_style)"
    "[$repo_root]($repo_root_style)"
    "[$after_root_path]($after_repo_root_style)"
    "[$read_only]($read_only_style) "
)


class Settings(BaseSettings):
    PROJECT_NAME: str = "smart-directory"
    VERSION: str = VERSION

    USE_LOGICAL_PATH: bool = True
    FORMAT: str = DEFAULT_FORMAT
    REPO_ROOT_FORMAT: str = DEFAULT_REPO_ROOT_FORMAT
    STYLE: str = "cyan bold"
    REPO_ROOT_STYLE: str | None = None
    BEFORE_REPO_ROOT_STYLE: str | None = None
    AFTER_REPO_ROOT_STYLE: str | None = None
    # Opt-out, unlike starship's own module which ships disabled
    DISABLED: bool = False
    READ_ONLY: str = "🔒"
    READ_ONLY_STYLE: str = "red"
    HOME_SYMBOL: str = "~"
    USE_OS_PATH_SEP: bool = True

    GIT_TIMEOUT: float = 1.0
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL

    model_config = SettingsConfigDict(
        env_prefix="SMART_DIRECTORY_",
        env_file=(CONFIG_FILE, ".env"),
        extra="ignore",
    )

    @property
    def repo_root_style(self) -> str:
        return self.REPO_ROOT_STYLE or self.STYLE

    @property
    def before_repo_root_style(self) -> str:
        return self.BEFORE_REPO_ROOT_STYLE or self.STYLE

    @property
    def after_repo_root_style(self) -> str:
        return self.AFTER_REPO_ROOT_STYLE or self.STYLE


@lru_cache
def get_settings() -> Settings:
    return Settings()
