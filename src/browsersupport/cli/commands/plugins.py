"""Plugin listing command."""

from pathlib import Path
from typing import Annotated

import typer

from browsersupport.cli.console import console, create_table, error
from browsersupport.types import VersionRange


def register(app: typer.Typer) -> None:
    """Register the plugins command."""

    @app.command()
    def plugins(
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
    ) -> None:
        """List known plugins and the browsers they support."""
        from browsersupport.cli.runtime import load_app_config
        from browsersupport.types import ConfigurationError

        app_config = load_app_config(config, required=False)
        try:
            registry = app_config.build_registry()
        except (ConfigurationError, ValueError) as e:
            error(str(e))
            raise typer.Exit(1) from None

        table = create_table(
            "Plugins",
            [
                ("ID", {"style": "cyan", "no_wrap": True}),
                ("Name", "green"),
                ("Aliases", ""),
                ("Browsers", ""),
            ],
        )
        for plugin in registry:
            rules = [
                _format_rule(rule.product, rule.versions)
                for rule in plugin.browser_support.whitelist
            ]
            rules.extend(
                f"not {_format_rule(rule.product, rule.versions)}"
                for rule in plugin.browser_support.blacklist
            )
            table.add_row(
                plugin.id,
                plugin.human_readable_name,
                ", ".join(plugin.aliases),
                ", ".join(rules),
            )
        console.print(table)


def _format_rule(product: str, versions: VersionRange) -> str:
    if versions.min is None and versions.max is None:
        return product
    if versions.max is None:
        return f"{product} {versions.min}+"
    if versions.min == versions.max:
        return f"{product} {versions.min}"
    return f"{product} {versions.min or 0}-{versions.max}"
