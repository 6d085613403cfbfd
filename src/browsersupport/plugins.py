"""Registry of known browser plugins and their browser compatibility."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from browsersupport.lists import BrowserSupportList

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PluginInfo:
    """A browser plugin an application may depend on."""

    id: str
    human_readable_name: str
    browser_support: BrowserSupportList
    aliases: list[str] = field(default_factory=list)

    def names(self) -> list[str]:
        """All spellings that resolve to this plugin."""
        return [self.id, self.human_readable_name, *self.aliases]


def _key(name: str) -> str:
    return " ".join(name.lower().split())


class PluginRegistry:
    """Registry for plugin definitions.

    Plugins are looked up by id, display name, or alias, case-insensitively.
    """

    def __init__(self) -> None:
        self._plugins: dict[str, PluginInfo] = {}
        self._names: dict[str, str] = {}

    def register(self, plugin: PluginInfo) -> None:
        if plugin.id in self._plugins:
            raise ValueError(f"Plugin '{plugin.id}' already registered")

        keys = {_key(name) for name in plugin.names() if name.strip()}
        for key in keys:
            if key in self._names:
                raise ValueError(
                    f"Plugin name '{key}' already registered for '{self._names[key]}'"
                )

        self._plugins[plugin.id] = plugin
        for key in keys:
            self._names[key] = plugin.id
        logger.debug(f"Registered plugin: {plugin.id}")

    def get(self, plugin_id: str) -> PluginInfo:
        if plugin_id not in self._plugins:
            raise KeyError(f"Plugin '{plugin_id}' not found")
        return self._plugins[plugin_id]

    def has(self, plugin_id: str) -> bool:
        return plugin_id in self._plugins

    def parse_plugin_name(self, name: str) -> str | None:
        """Resolve a plugin id, display name or alias to the canonical id."""
        return self._names.get(_key(name))

    @property
    def ids(self) -> list[str]:
        return list(self._plugins.keys())

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, plugin_id: str) -> bool:
        return plugin_id in self._plugins

    def __iter__(self) -> Iterator[PluginInfo]:
        return iter(self._plugins.values())


BUILTIN_PLUGINS: list[dict] = [
    {
        "id": "flash",
        "name": "Adobe Flash Player",
        "aliases": ["flash", "flash player", "adobe flash", "shockwave flash"],
        "whitelist": ["chrome", "firefox", "ie 6+", "edge", "safari", "opera"],
    },
    {
        "id": "silverlight",
        "name": "Microsoft Silverlight",
        "aliases": ["silverlight"],
        "whitelist": ["ie 6+", "firefox 3-51", "chrome 4-41", "safari 4+"],
    },
    {
        "id": "java",
        "name": "Java Plug-in",
        "aliases": ["java", "java applet", "jre"],
        "whitelist": ["ie 6-11", "firefox 3-51", "chrome 1-41", "safari"],
    },
    {
        "id": "quicktime",
        "name": "Apple QuickTime",
        "aliases": ["quicktime", "qt"],
        "whitelist": ["safari", "ie 6-11", "firefox 3-51", "chrome 1-41"],
    },
    {
        "id": "unity",
        "name": "Unity Web Player",
        "aliases": ["unity", "unity3d"],
        "whitelist": ["ie 6-11", "firefox 3-51", "chrome 1-41", "safari"],
    },
]


def plugin_from_dict(data: dict) -> PluginInfo:
    """Build a PluginInfo from a plain definition."""
    return PluginInfo(
        id=data["id"],
        human_readable_name=data["name"],
        aliases=list(data.get("aliases", [])),
        browser_support=BrowserSupportList(
            blacklist=data.get("blacklist"),
            whitelist=data.get("whitelist"),
        ),
    )


def create_plugin_registry(include_builtins: bool = True) -> PluginRegistry:
    """Create a new registry, optionally pre-populated with built-in plugins."""
    registry = PluginRegistry()
    if include_builtins:
        for data in BUILTIN_PLUGINS:
            registry.register(plugin_from_dict(data))
    return registry


_registry: PluginRegistry | None = None


def get_plugin_registry() -> PluginRegistry:
    """Get the shared registry of built-in plugins."""
    global _registry
    if _registry is None:
        _registry = create_plugin_registry()
    return _registry


def parse_plugin_name(name: str) -> str | None:
    """Resolve a plugin name against the shared registry."""
    return get_plugin_registry().parse_plugin_name(name)
