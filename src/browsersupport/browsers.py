"""Browser name aliases and browser/version rule parsing."""

from __future__ import annotations

from browsersupport.types import ProductVersion, VersionRange
from browsersupport.versions import parse_version_range

# Canonical browser name -> accepted spellings (compared lower-cased)
BROWSER_ALIASES: dict[str, tuple[str, ...]] = {
    "chrome": ("chrome", "google chrome", "chromium"),
    "firefox": ("firefox", "ff", "mozilla firefox"),
    "ie": ("ie", "msie", "internet explorer"),
    "edge": ("edge", "microsoft edge"),
    "safari": ("safari", "mobile safari"),
    "opera": ("opera",),
    "android": ("android", "android browser"),
}

_ALIAS_LOOKUP: dict[str, str] = {
    alias: canonical
    for canonical, aliases in BROWSER_ALIASES.items()
    for alias in aliases
}


def normalize_browser_name(name: str) -> str:
    """Return the canonical browser name, or the lower-cased input if unknown."""
    key = " ".join(name.lower().split())
    return _ALIAS_LOOKUP.get(key, key)


def parse_browser_version_string(text: str) -> ProductVersion | None:
    """Parse a list rule such as ``"ie 6-8"``, ``"firefox 30+"`` or ``"chrome"``.

    A rule without a version range applies to every version of the browser.
    """
    text = " ".join(text.split())
    if not text:
        return None

    name, _, range_text = text.rpartition(" ")
    versions = parse_version_range(range_text) if name else None
    if versions is None:
        if any(char.isdigit() for char in range_text):
            return None
        # The whole rule is a browser name, possibly multi-word
        name, versions = text, VersionRange()

    canonical = normalize_browser_name(name)
    if not canonical:
        return None
    return ProductVersion(product=canonical, versions=versions)
