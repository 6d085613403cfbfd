"""Path resolution for browsersupport configuration.

The base directory can be overridden with the BROWSERSUPPORT_HOME environment
variable. Default location: ~/.browsersupport
"""

import os
from pathlib import Path

ENV_VAR = "BROWSERSUPPORT_HOME"


def get_home() -> Path:
    """Get the base directory for browsersupport data.

    Resolution order:
    1. BROWSERSUPPORT_HOME environment variable (if set)
    2. ~/.browsersupport
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser()
    return Path.home() / ".browsersupport"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_home() / "config.toml"
