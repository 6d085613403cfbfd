"""File-backed browser feature data.

The document maps providers to features to per-browser support::

    {
        "caniuse": {
            "flexbox": {
                "chrome": {"supported": true, "since": 29},
                "ie": {"supported": false}
            }
        }
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from browsersupport.types import FeatureSupport

logger = logging.getLogger(__name__)


class FeatureDatabase:
    """In-memory feature support data usable as a feature lookup."""

    def __init__(self, data: dict[str, dict[str, dict[str, Any]]] | None = None):
        self._data: dict[str, dict[str, dict[str, FeatureSupport]]] = {}
        for provider, features in (data or {}).items():
            self._data[provider] = {
                feature: {
                    browser: FeatureSupport.coerce(value)
                    for browser, value in browsers.items()
                }
                for feature, browsers in features.items()
            }

    @classmethod
    def from_path(cls, path: Path) -> FeatureDatabase:
        """Load feature data from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a JSON object.
        """
        path = Path(path).expanduser()
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Feature data must be a JSON object: {path}")
        logger.debug(f"Loaded feature data for {len(data)} provider(s) from {path}")
        return cls(data)

    @property
    def providers(self) -> list[str]:
        return list(self._data.keys())

    def features(self, provider: str) -> list[str]:
        return list(self._data.get(provider, {}).keys())

    def lookup(self, provider: str, feature: str) -> dict[str, FeatureSupport]:
        """Per-browser support for a feature; empty if the feature is unknown."""
        browsers = self._data.get(provider, {}).get(feature)
        if browsers is None:
            logger.warning(f"No feature data for {provider}:{feature}")
            return {}
        return dict(browsers)

    def __call__(self, provider: str, feature: str) -> dict[str, FeatureSupport]:
        return self.lookup(provider, feature)
