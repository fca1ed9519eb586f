"""Application configuration."""

from pathlib import Path

from pydantic import BaseModel, ValidationError

from clinic.exceptions import DataLoadingError
from clinic.utils.logging import LogConfig

DEFAULT_CONFIG_FILE = Path("config.json")


class AppConfig(BaseModel):
    """Configuration values read at startup."""

    log_level: str = "INFO"
    log_file: str | None = None
    user_prefs_file_path: Path = Path("preferences.json")

    def log_config(self) -> LogConfig:
        return LogConfig(level=self.log_level, log_file=self.log_file)


def read_config(path: Path) -> AppConfig | None:
    """Read the config file at ``path``.

    Returns:
        The configuration, or None if the file does not exist

    Raises:
        DataLoadingError: If the file exists but is not a valid config
    """
    if not path.exists():
        return None
    try:
        return AppConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        raise DataLoadingError(f"Could not load config file {path}") from e


def save_config(config: AppConfig, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
