"""Support spec model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SupportSpec(BaseModel):
    """What an application needs from a browser.

    ``browser_features`` and ``browser_plugins`` accept a single string as
    shorthand for a one-element list.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    blacklist: list[str] = Field(default_factory=list)
    whitelist: list[str] = Field(default_factory=list)
    # "<provider>:<featureName>"
    browser_features: list[str] = Field(default_factory=list, alias="browserFeatures")
    # "<pluginProductName> <versionRangeExpression>"
    browser_plugins: list[str] = Field(default_factory=list, alias="browserPlugins")

    @field_validator("browser_features", "browser_plugins", mode="before")
    @classmethod
    def _wrap_single_string(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("blacklist", "whitelist", mode="before")
    @classmethod
    def _default_lists(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value
