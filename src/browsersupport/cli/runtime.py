"""Shared setup for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape

from browsersupport.cli.console import error
from browsersupport.config import AppConfig, load_config


def load_app_config(path: Path | None, *, required: bool = True) -> AppConfig:
    """Load configuration, exiting with an error message on failure.

    When ``required`` is False and no config file exists in the default
    locations, an empty configuration is returned.
    """
    try:
        return load_config(path)
    except FileNotFoundError as e:
        if path is None and not required:
            return AppConfig()
        error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        error(f"Configuration validation failed:\n{escape(str(e))}")
        raise typer.Exit(1) from None
    except ValueError as e:
        error(f"Invalid configuration: {e}")
        raise typer.Exit(1) from None
