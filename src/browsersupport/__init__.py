"""Browser support resolution public API.

Public API:
- BrowserSupport: Main entry point
- SupportSpec: What an application needs from a browser

Collaborators:
- BrowserSupportList: Explicit blacklist/whitelist rules
- PluginRegistry, PluginInfo: Known plugins and their browser support
- FeatureDatabase: File-backed feature lookup
"""

from browsersupport.features import FeatureDatabase
from browsersupport.lists import BrowserSupportList
from browsersupport.plugins import (
    PluginInfo,
    PluginRegistry,
    create_plugin_registry,
    get_plugin_registry,
    parse_plugin_name,
)
from browsersupport.spec import SupportSpec
from browsersupport.support import BrowserSupport
from browsersupport.types import (
    ConfigurationError,
    FeatureSupport,
    PluginCondition,
    ProductVersion,
    SupportLevel,
    Verdict,
    VersionRange,
)
from browsersupport.versions import parse_product_version_string

__all__ = [
    "BrowserSupport",
    "BrowserSupportList",
    "ConfigurationError",
    "FeatureDatabase",
    "FeatureSupport",
    "PluginCondition",
    "PluginInfo",
    "PluginRegistry",
    "ProductVersion",
    "SupportLevel",
    "SupportSpec",
    "Verdict",
    "VersionRange",
    "create_plugin_registry",
    "get_plugin_registry",
    "parse_plugin_name",
    "parse_product_version_string",
]
