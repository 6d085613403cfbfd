"""Configuration models using Pydantic."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from browsersupport.plugins import PluginRegistry, create_plugin_registry, plugin_from_dict
from browsersupport.spec import SupportSpec

logger = logging.getLogger(__name__)


class PluginConfig(BaseModel):
    """A plugin declared in configuration, in addition to the built-ins."""

    id: str
    name: str
    aliases: list[str] = []
    blacklist: list[str] = []
    whitelist: list[str] = []


class AppConfig(BaseModel):
    """Root configuration model."""

    # JSON feature data; relative paths resolve against the config file
    features_path: Path | None = None
    support: SupportSpec = Field(default_factory=SupportSpec)
    plugins: list[PluginConfig] = Field(default_factory=list)

    def build_registry(self) -> PluginRegistry:
        """Built-in plugins plus any declared in configuration.

        Raises:
            ConfigurationError: If a plugin's browser rules don't parse.
            ValueError: If a plugin id or alias is already taken.
        """
        registry = create_plugin_registry()
        for plugin in self.plugins:
            registry.register(plugin_from_dict(plugin.model_dump()))
        if self.plugins:
            logger.debug(f"Registered {len(self.plugins)} configured plugin(s)")
        return registry
