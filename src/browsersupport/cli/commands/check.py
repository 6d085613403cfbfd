"""Browser support check command."""

from pathlib import Path
from typing import Annotated

import typer

from browsersupport.cli.console import console, dim, error

EXIT_CODES = {"supported": 0, "unsupported": 1, "unknown": 2}

STYLES = {"supported": "green", "unsupported": "red", "unknown": "yellow"}


def register(app: typer.Typer) -> None:
    """Register the check command."""

    @app.command()
    def check(
        name: Annotated[str, typer.Argument(help="Browser name, e.g. chrome")],
        version: Annotated[str, typer.Argument(help="Browser version, e.g. 30")],
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
        features: Annotated[
            Path | None,
            typer.Option(
                "--features",
                "-f",
                help="Path to JSON feature data (overrides features_path)",
            ),
        ] = None,
    ) -> None:
        """Check whether a browser version is supported.

        Exits 0 when supported, 1 when unsupported, 2 when unknown.
        """
        from browsersupport.cli.runtime import load_app_config
        from browsersupport.features import FeatureDatabase
        from browsersupport.support import BrowserSupport
        from browsersupport.types import ConfigurationError
        from browsersupport.versions import parse_version

        parsed_version = parse_version(version)
        if parsed_version is None:
            error(f"Invalid version: {version}")
            raise typer.Exit(1)

        app_config = load_app_config(config)
        features_path = features or app_config.features_path

        try:
            database = (
                FeatureDatabase.from_path(features_path)
                if features_path is not None
                else FeatureDatabase()
            )
            support = BrowserSupport(
                app_config.support,
                database,
                plugins=app_config.build_registry(),
            )
        except FileNotFoundError as e:
            error(f"Feature data not found: {e.filename}")
            raise typer.Exit(1) from None
        except (ConfigurationError, ValueError) as e:
            error(str(e))
            raise typer.Exit(1) from None

        verdict = support.get_browser_support(name, parsed_version)
        style = STYLES[verdict.support]
        console.print(f"{name} {version}: [{style}]{verdict.support}[/{style}]")
        for condition in verdict.conditions or []:
            dim(f"  requires {condition.name} {condition.required_version}")

        raise typer.Exit(EXIT_CODES[verdict.support])
