"""Public types for browser support resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

SupportLevel = Literal["supported", "unsupported", "unknown"]

Version = int | float

T = TypeVar("T")


class ConfigurationError(ValueError):
    """Raised when a support spec cannot be turned into a resolver."""

    pass


@dataclass(slots=True, frozen=True)
class VersionRange:
    """Inclusive version range; a missing bound is open."""

    min: Version | None = None
    max: Version | None = None

    def contains(self, version: Version) -> bool:
        try:
            if self.min is not None and version < self.min:
                return False
            if self.max is not None and version > self.max:
                return False
        except TypeError:
            # Versions that don't compare with the bounds never match
            return False
        return True


@dataclass(slots=True, frozen=True)
class ProductVersion:
    """A product name paired with the versions it applies to."""

    product: str
    versions: VersionRange


@dataclass(slots=True, frozen=True)
class FeatureSupport:
    """Support for one feature in one browser."""

    supported: bool
    since: Version | None = None

    @classmethod
    def coerce(cls, value: FeatureSupport | dict[str, Any]) -> FeatureSupport:
        if isinstance(value, FeatureSupport):
            return value
        return cls(supported=bool(value.get("supported")), since=value.get("since"))


@dataclass(slots=True, frozen=True)
class PluginCondition:
    """Default condition attached to plugin-dependent support."""

    name: str
    required_version: str


@dataclass(slots=True, frozen=True)
class Verdict(Generic[T]):
    """Result of a browser support query.

    ``conditions`` is only set when support depends on plugins being present.
    """

    support: SupportLevel
    conditions: list[T] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"support": self.support}
        if self.conditions is not None:
            result["conditions"] = list(self.conditions)
        return result
