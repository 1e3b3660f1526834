"""Configuration file loading and saving."""

from pathlib import Path

import yaml

from ..errors import ConfigError
from .schema import ColorTweenConfig


def load_config(config_path: Path | str) -> ColorTweenConfig:
    """
    Load configuration from a YAML file.

    A missing or empty file yields the defaults (mode "rgb").

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values
    """
    config_path = Path(config_path)
    if not config_path.exists():
        return ColorTweenConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    return ColorTweenConfig.from_dict(data)


def save_config(config: ColorTweenConfig, config_path: Path | str) -> None:
    """Save configuration to a YAML file."""
    with open(config_path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
