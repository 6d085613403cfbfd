"""Configuration management commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from browsersupport.cli.console import console, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: validate"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: ./browsersupport.toml, then $BROWSERSUPPORT_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Manage configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        if action != "validate":
            error(f"Unknown action: {action}")
            raise typer.Exit(1)

        from rich.table import Table

        from browsersupport.cli.runtime import load_app_config
        from browsersupport.features import FeatureDatabase
        from browsersupport.support import BrowserSupport
        from browsersupport.types import ConfigurationError

        config_obj = load_app_config(path)

        try:
            # Plugin requirements and list rules are checked at construction;
            # feature lookups are not needed to validate them
            support = BrowserSupport(
                config_obj.support.model_copy(update={"browser_features": []}),
                FeatureDatabase(),
                plugins=config_obj.build_registry(),
            )
        except (ConfigurationError, ValueError) as e:
            error(f"Configuration validation failed: {e}")
            raise typer.Exit(1) from None

        table = Table(title="Configuration Summary")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Features file", str(config_obj.features_path or "(none)"))
        table.add_row(
            "Browser features", ", ".join(config_obj.support.browser_features) or "-"
        )
        required = support.required_plugins
        table.add_row("Required plugins", ", ".join(required) or "-")
        table.add_row("Blacklist", ", ".join(config_obj.support.blacklist) or "-")
        table.add_row("Whitelist", ", ".join(config_obj.support.whitelist) or "-")
        table.add_row("Configured plugins", str(len(config_obj.plugins)))

        console.print(table)
        success("Configuration is valid")
