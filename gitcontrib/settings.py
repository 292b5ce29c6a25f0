"""
Settings for GitContrib.

Settings are read from a YAML file. The file is looked up in this order:
the path given on the command line, ``$GITCONTRIB_CONFIG``, then
``~/.gitcontrib.yaml``. A missing file yields the defaults.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from gitcontrib.core.log_aggregator import COMMIT_SENTINEL
from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "GITCONTRIB_CONFIG"
DEFAULT_CONFIG_FILENAME = ".gitcontrib.yaml"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROFILE_FILENAME = ".profile"


def default_profile_path() -> str:
    return os.path.join(os.path.expanduser("~"), DEFAULT_PROFILE_FILENAME)


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    profile_path: Optional[str] = None
    sentinel: str = COMMIT_SENTINEL

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        log_file = data.get("log_file")
        profile_path = data.get("profile_path")
        return cls(
            log_level=str(data.get("log_level", DEFAULT_LOG_LEVEL)).upper(),
            log_file=os.path.expanduser(str(log_file)) if log_file else None,
            profile_path=os.path.expanduser(str(profile_path)) if profile_path else None,
            sentinel=str(data.get("sentinel", COMMIT_SENTINEL)),
        )

    @property
    def resolved_profile_path(self) -> str:
        return self.profile_path or default_profile_path()


def settings_path(explicit: Optional[str] = None) -> str:
    if explicit:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return from_env
    return os.path.join(os.path.expanduser("~"), DEFAULT_CONFIG_FILENAME)


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML.

    Args:
        config_path: Explicit settings file; falls back to the lookup order above

    Returns:
        Settings instance

    Raises:
        ValueError: If the file is not valid YAML or not a mapping
    """
    path = settings_path(config_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        if config_path:
            logger.warning(f"Config file {path} not found, using defaults")
        return Settings()
    except yaml.YAMLError as e:
        raise ValueError(f"Config file {path} is not valid YAML: {e}")

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    logger.debug(f"Loaded settings from {path}")
    return Settings.from_dict(data)
