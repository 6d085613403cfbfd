"""Configuration loading from TOML files."""

import tomllib
from pathlib import Path

from browsersupport.config.models import AppConfig
from browsersupport.config.paths import get_config_path


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("browsersupport.toml"),  # Current directory
        get_config_path(),  # ~/.browsersupport/config.toml (or BROWSERSUPPORT_HOME)
    ]


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Validated AppConfig instance.

    Raises:
        FileNotFoundError: If no config file is found.
        ValueError: If config file is invalid.
    """
    config_path: Path | None = None

    default_paths = _get_default_config_paths()

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in default_paths:
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        raise FileNotFoundError(
            f"No config file found. Searched: {', '.join(str(p) for p in default_paths)}"
        )

    with config_path.open("rb") as f:
        raw_config = tomllib.load(f)

    config = AppConfig.model_validate(raw_config)
    if config.features_path is not None:
        features_path = config.features_path.expanduser()
        if not features_path.is_absolute():
            features_path = config_path.parent / features_path
        config.features_path = features_path
    return config
