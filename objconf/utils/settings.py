# objconf/utils/settings.py
"""
Typed settings for objconf, loaded from YAML and validated with pydantic.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

from pydantic import BaseModel, Field, field_validator

from objconf.loader.yaml_loader import DEFAULT_MAX_INCLUDE_DEPTH, load_config

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"


# -------------------
# Pydantic Settings
# -------------------
class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


class FactorySettings(BaseModel):
    strict: bool = True
    instantiate_nested: bool = True
    aliases: Dict[str, str] = Field(default_factory=dict)


class LoaderSettings(BaseModel):
    max_include_depth: int = Field(default=DEFAULT_MAX_INCLUDE_DEPTH, ge=0)


class Settings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    factory: FactorySettings = Field(default_factory=FactorySettings)
    loader: LoaderSettings = Field(default_factory=LoaderSettings)


# -------------------
# Functions
# -------------------
def load_settings(settings_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load and validate settings.

    Args:
        settings_path (str | Path, optional): YAML settings file. Defaults
            to the packaged ``objconf/config/settings.yaml``.

    Returns:
        Settings: Typed settings object.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        pydantic.ValidationError: If a value has the wrong type.
    """
    path = Path(settings_path) if settings_path else DEFAULT_SETTINGS_PATH
    raw: Dict[str, Any] = load_config(path)
    settings = Settings(**raw)
    logger.debug("Settings loaded from %s", path)
    return settings
