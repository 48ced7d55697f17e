"""
User settings, read from an optional YAML file.

    # ~/.config/calendartm/config.yml
    data_file: ~/calendar/tasks.txt
    log_level: info
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator

from calendartm.logs import get_logger
from calendartm.recovery import ConfigError

log = get_logger("config")

CONFIG_ENV = 'CALENDARTM_CONFIG'
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "calendartm" / "config.yml"
DEFAULT_DATA_FILE = Path("tasks.txt")

class Settings(BaseModel):
    data_file: Path = Field(default=DEFAULT_DATA_FILE, description="Calendar text file to load and save")
    log_level: Optional[str] = Field(default=None, description="Console log level, such as info or debug")

    @field_validator('data_file')
    @classmethod
    def expand_user(cls, v):
        return v.expanduser()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        if v is None:
            return v
        v = v.upper()
        if v not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Unknown log level: {v}")
        return v

def config_path() -> Path:
    env_path = os.getenv(CONFIG_ENV, '')
    return Path(env_path).expanduser() if env_path else DEFAULT_CONFIG_PATH

def load_settings(file_path: Union[Path, str, None] = None) -> Settings:
    """
    Load settings, falling back to defaults when no config file exists.

    Raises:
        ConfigError: the file exists but is not valid YAML or has bad values
    """
    file_path = Path(file_path) if file_path is not None else config_path()
    if not file_path.exists():
        log.debug(f"No config file at {file_path}, using defaults")
        return Settings()

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {file_path} must contain a mapping")
        return Settings(**data)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML syntax error in {file_path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {file_path}: {e}") from e
    except (IOError, OSError) as e:
        raise ConfigError(f"Failed to read config file {file_path}: {e}") from e
