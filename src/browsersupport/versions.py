"""Version and product/version-range string parsing.

Versions are plain numbers. Ranges use a small grammar:

- ``10+``: version 10 and later
- ``6-8``: versions 6 through 8, inclusive
- ``9``: exactly version 9
- ``*``: any version
"""

from __future__ import annotations

import re

from browsersupport.types import ProductVersion, Version, VersionRange

_NUMBER = r"\d+(?:\.\d+)?"
_VERSION_PATTERN = re.compile(rf"^{_NUMBER}$")
_RANGE_PATTERN = re.compile(
    rf"^(?:(?P<plus>{_NUMBER})\+|(?P<low>{_NUMBER})-(?P<high>{_NUMBER})|(?P<exact>{_NUMBER})|\*)$"
)


def parse_version(value: str | Version) -> Version | None:
    """Parse ``"10"`` to ``10`` and ``"10.1"`` to ``10.1``; None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    text = value.strip()
    if not _VERSION_PATTERN.match(text):
        return None
    return float(text) if "." in text else int(text)


def parse_version_range(text: str) -> VersionRange | None:
    """Parse a range expression, returning None when it does not match."""
    text = text.strip()
    if not text:
        return VersionRange()

    match = _RANGE_PATTERN.match(text)
    if match is None:
        return None

    if plus := match.group("plus"):
        return VersionRange(min=parse_version(plus))
    if exact := match.group("exact"):
        version = parse_version(exact)
        return VersionRange(min=version, max=version)
    if low := match.group("low"):
        low_version = parse_version(low)
        high_version = parse_version(match.group("high"))
        if low_version is None or high_version is None or low_version > high_version:
            return None
        return VersionRange(min=low_version, max=high_version)
    return VersionRange()


def parse_product_version_string(text: str) -> ProductVersion | None:
    """Split ``"<product> <range>"`` into a ProductVersion.

    The range is the last whitespace-separated token, so product names may
    contain spaces (``"Adobe Flash 10.1+"``).
    """
    parts = text.strip().rsplit(None, 1)
    if len(parts) != 2:
        return None

    product, range_text = parts
    versions = parse_version_range(range_text)
    if versions is None:
        return None
    return ProductVersion(product=product.strip(), versions=versions)
