"""Browser support resolution.

Combines three sources of evidence into one verdict, in strict precedence:

1. Explicit blacklist/whitelist rules
2. Declared browser features (supported since a version, or not at all)
3. Required plugins, all of which must support the browser

Anything else is ``unknown``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from browsersupport.lists import BrowserSupportList
from browsersupport.plugins import PluginRegistry, get_plugin_registry
from browsersupport.spec import SupportSpec
from browsersupport.types import (
    ConfigurationError,
    FeatureSupport,
    PluginCondition,
    Verdict,
    Version,
    VersionRange,
)
from browsersupport.versions import parse_product_version_string

logger = logging.getLogger(__name__)

T = TypeVar("T")

FeatureResult = Mapping[str, FeatureSupport | Mapping[str, Any]]
FeatureLookup = Callable[[str, str], FeatureResult]
AsyncFeatureLookup = Callable[[str, str], Awaitable[FeatureResult]]
PluginRequirementGenerator = Callable[[str, str], T]


def split_feature(browser_feature: str) -> tuple[str, str]:
    """Split ``"<provider>:<feature>"`` at the first colon."""
    provider = browser_feature.split(":", 1)[0]
    return provider, browser_feature[browser_feature.find(":") + 1 :]


def _at_least(version: Version, since: Version | None) -> bool | None:
    """Compare against a feature threshold; None when there is no usable threshold."""
    if since is None:
        return None
    try:
        return version >= since
    except TypeError:
        return None


def _coerce_spec(spec: SupportSpec | Mapping[str, Any]) -> SupportSpec:
    if isinstance(spec, SupportSpec):
        return spec
    return SupportSpec.model_validate(spec)


class BrowserSupport:
    """Answers whether an application supports a given browser version.

    Built once from a spec; queries never modify the instance.
    """

    def __init__(
        self,
        spec: SupportSpec | Mapping[str, Any],
        lookup_browser_feature: FeatureLookup,
        *,
        plugins: PluginRegistry | None = None,
    ) -> None:
        spec = _coerce_spec(spec)
        self._plugins = plugins if plugins is not None else get_plugin_registry()
        self._supported_browsers: dict[str, FeatureSupport] = {}
        self._unsupported_browsers: set[str] = set()
        self._required_plugins: dict[str, VersionRange] = {}
        self._support_list = BrowserSupportList(spec.blacklist, spec.whitelist)

        for browser_feature in spec.browser_features:
            provider, feature_name = split_feature(browser_feature)
            support = lookup_browser_feature(provider, feature_name)
            for browser, value in support.items():
                entry = FeatureSupport.coerce(value)
                if entry.supported:
                    self._supported_browsers[browser] = entry
                else:
                    self._unsupported_browsers.add(browser)

        for browser_plugin in spec.browser_plugins:
            parsed = parse_product_version_string(browser_plugin)
            if parsed is None:
                raise ConfigurationError(
                    f"unable to parse plugin product/version string: {browser_plugin!r}"
                )

            plugin_id = self._plugins.parse_plugin_name(parsed.product)
            if plugin_id is None:
                raise ConfigurationError(f"unknown plugin name: {parsed.product!r}")

            self._required_plugins[plugin_id] = parsed.versions

        logger.debug(
            f"Configured browser support: {len(self._supported_browsers)} supported, "
            f"{len(self._unsupported_browsers)} unsupported, "
            f"{len(self._required_plugins)} required plugin(s)"
        )

    @classmethod
    async def from_async_lookup(
        cls,
        spec: SupportSpec | Mapping[str, Any],
        lookup_browser_feature: AsyncFeatureLookup,
        *,
        plugins: PluginRegistry | None = None,
    ) -> BrowserSupport:
        """Build an instance once every feature lookup has resolved.

        Lookups are awaited one at a time, in declaration order.
        """
        spec = _coerce_spec(spec)
        results: dict[tuple[str, str], FeatureResult] = {}
        for browser_feature in spec.browser_features:
            key = split_feature(browser_feature)
            results[key] = await lookup_browser_feature(*key)
        return cls(
            spec,
            lambda provider, feature: results[(provider, feature)],
            plugins=plugins,
        )

    @property
    def supported_browsers(self) -> dict[str, FeatureSupport]:
        return dict(self._supported_browsers)

    @property
    def unsupported_browsers(self) -> frozenset[str]:
        return frozenset(self._unsupported_browsers)

    @property
    def required_plugins(self) -> dict[str, VersionRange]:
        return dict(self._required_plugins)

    def get_browser_support(
        self,
        name: str,
        version: Version,
        plugin_requirement_generator: PluginRequirementGenerator[T] | None = None,
    ) -> Verdict[T]:
        """Resolve support for one browser version."""
        # Explicit rules are authoritative
        explicit = self._support_list.check(name, version)
        if explicit is not None:
            logger.debug(f"{name} {version}: explicit rule -> {explicit}")
            return Verdict("supported" if explicit else "unsupported")

        # Every declared feature works in this version, or some feature is
        # missing outright or only arrives in a later version
        entry = self._supported_browsers.get(name)
        at_least = _at_least(version, entry.since) if entry is not None else None
        if at_least:
            return Verdict("supported")
        elif name in self._unsupported_browsers or at_least is False:
            return Verdict("unsupported")

        # Support is conditional on every required plugin
        if self._required_plugins:
            generator = plugin_requirement_generator or PluginCondition
            supported_plugins: list[tuple[str, str]] = []

            for plugin_id, versions in self._required_plugins.items():
                plugin = self._plugins.get(plugin_id)
                if not plugin.browser_support.check(name, version):
                    logger.debug(f"{name} {version}: plugin {plugin_id} unsupported")
                    return Verdict("unsupported")
                supported_plugins.append(
                    (plugin.human_readable_name, f"{versions.min or 0}+")
                )

            return Verdict(
                "supported",
                conditions=[
                    generator(plugin_name, required_version)
                    for plugin_name, required_version in supported_plugins
                ],
            )

        return Verdict("unknown")
