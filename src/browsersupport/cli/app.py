"""Main CLI application."""

from typing import Annotated

import typer

from browsersupport.cli.commands import check, config, plugins

app = typer.Typer(
    name="browsersupport",
    help="Resolve whether an application supports a browser version",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level (DEBUG, INFO, WARNING, ERROR)",
        ),
    ] = None,
) -> None:
    """Resolve whether an application supports a browser version."""
    from browsersupport.logging import configure_logging

    configure_logging(level=log_level, use_rich=True)


check.register(app)
config.register(app)
plugins.register(app)


if __name__ == "__main__":
    app()
