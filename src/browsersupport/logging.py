"""Centralized logging configuration.

Entry points (the CLI, or an embedding application) call configure_logging()
once at startup. Library modules only create module-level loggers.

Logging Levels:
- DEBUG: Configuration summaries, which precedence step decided a verdict
- INFO: CLI operations
- WARNING: Missing feature data
- ERROR: Failures that abort a command
"""

import logging
import os

ENV_VAR = "BROWSERSUPPORT_LOG_LEVEL"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    Converts full module paths to short component names:
    - browsersupport.support -> support
    - browsersupport.config.loader -> config
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "browsersupport":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None) -> str:
    """Resolve a level name from the argument or environment, defaulting to INFO."""
    if level is None:
        level = os.environ.get(ENV_VAR, "INFO")
    level = level.upper()
    if level not in LEVELS:
        level = "INFO"
    return level


def configure_logging(level: str | None = None, use_rich: bool = False) -> None:
    """Configure logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses BROWSERSUPPORT_LOG_LEVEL env var or INFO.
        use_rich: Use Rich handler for colorful output.
    """
    log_level = getattr(logging, resolve_level(level))

    if use_rich:
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=True,
        )
        handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            ComponentFormatter(
                "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )
