"""CLI command modules."""

from browsersupport.cli.commands import check, config, plugins

__all__ = [
    "check",
    "config",
    "plugins",
]
