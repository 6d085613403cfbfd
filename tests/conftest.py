"""Shared test fixtures and factories."""

import json
from pathlib import Path
from typing import Any

import pytest

from browsersupport.lists import BrowserSupportList
from browsersupport.plugins import PluginInfo, PluginRegistry

# =============================================================================
# Feature Data Fixtures
# =============================================================================


@pytest.fixture
def feature_data() -> dict[str, Any]:
    """Feature support data keyed by provider, feature, then browser."""
    return {
        "acme": {
            "flexbox": {
                "chrome": {"supported": True, "since": 29},
                "firefox": {"supported": True, "since": 28},
                "ie": {"supported": False},
            },
            "grid": {
                "chrome": {"supported": True, "since": 57},
                "firefox": {"supported": False},
            },
        },
    }


class RecordingLookup:
    """Feature lookup that records every call."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.data = data
        self.calls: list[tuple[str, str]] = []

    def __call__(self, provider: str, feature: str) -> dict[str, Any]:
        self.calls.append((provider, feature))
        return self.data.get(provider, {}).get(feature, {})


@pytest.fixture
def lookup(feature_data) -> RecordingLookup:
    return RecordingLookup(feature_data)


@pytest.fixture
def features_file(tmp_path: Path, feature_data) -> Path:
    path = tmp_path / "features.json"
    path.write_text(json.dumps(feature_data))
    return path


# =============================================================================
# Plugin Fixtures
# =============================================================================


@pytest.fixture
def plugin_registry() -> PluginRegistry:
    """Registry with two plugins of differing browser support."""
    registry = PluginRegistry()
    registry.register(
        PluginInfo(
            id="alpha",
            human_readable_name="Alpha Player",
            aliases=["alphaplayer"],
            browser_support=BrowserSupportList(whitelist=["chrome", "safari 5+"]),
        )
    )
    registry.register(
        PluginInfo(
            id="beta",
            human_readable_name="Beta Runtime",
            aliases=["beta"],
            browser_support=BrowserSupportList(whitelist=["chrome 10+", "opera"]),
        )
    )
    return registry


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def config_toml_content() -> str:
    """Valid TOML config content."""
    return """
features_path = "features.json"

[support]
browser_features = ["acme:flexbox"]
blacklist = ["ie 6-8"]
whitelist = ["opera"]
"""


@pytest.fixture
def config_file(tmp_path: Path, config_toml_content: str, features_file: Path) -> Path:
    """Create a temporary config file next to the feature data."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(config_toml_content)
    return config_path


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
