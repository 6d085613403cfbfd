"""Explicit blacklist/whitelist matching."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from browsersupport.browsers import normalize_browser_name, parse_browser_version_string
from browsersupport.types import ConfigurationError, ProductVersion, Version

logger = logging.getLogger(__name__)


class BrowserSupportList:
    """Explicit allow/deny rules for browsers.

    Blacklist rules win over whitelist rules. ``check`` returns None when no
    rule applies so callers can fall back to other evidence.
    """

    def __init__(
        self,
        blacklist: Iterable[str] | None = None,
        whitelist: Iterable[str] | None = None,
    ) -> None:
        self._blacklist = _parse_rules(blacklist or (), "blacklist")
        self._whitelist = _parse_rules(whitelist or (), "whitelist")

    @property
    def blacklist(self) -> list[ProductVersion]:
        return list(self._blacklist)

    @property
    def whitelist(self) -> list[ProductVersion]:
        return list(self._whitelist)

    def check(self, name: str, version: Version) -> bool | None:
        canonical = normalize_browser_name(name)
        if _matches(self._blacklist, canonical, version):
            return False
        if _matches(self._whitelist, canonical, version):
            return True
        return None

    def __bool__(self) -> bool:
        return bool(self._blacklist or self._whitelist)

    def __repr__(self) -> str:
        return (
            f"BrowserSupportList(blacklist={len(self._blacklist)}, "
            f"whitelist={len(self._whitelist)})"
        )


def _parse_rules(rules: Iterable[str], kind: str) -> tuple[ProductVersion, ...]:
    if isinstance(rules, str):
        rules = [rules]

    parsed: list[ProductVersion] = []
    for rule in rules:
        entry = parse_browser_version_string(rule)
        if entry is None:
            raise ConfigurationError(f"unable to parse {kind} rule: {rule!r}")
        parsed.append(entry)
    logger.debug(f"Parsed {len(parsed)} {kind} rule(s)")
    return tuple(parsed)


def _matches(rules: tuple[ProductVersion, ...], name: str, version: Version) -> bool:
    return any(
        rule.product == name and rule.versions.contains(version) for rule in rules
    )
