"""Console logging for CONCORDANCE.

The library emits records only through module-level loggers in the
``concordance`` namespace (one DEBUG record per correspondence built by a
factory). `configure_logging` renders them with Rich on stderr. The handler
is attached to the ``concordance`` logger, not the root logger, so a test
suite's own logging setup is left alone; calling it again replaces the
handler installed before.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from concordance.config import get_log_level, get_logger_levels

LIBRARY_LOGGER = "concordance"
HANDLER_NAME = "concordance-console"

logger = logging.getLogger(__name__)


def console_handler(
    level: int, *, color: bool = True, show_path: bool = False
) -> RichHandler:
    """Return a RichHandler writing ``concordance`` records to stderr.

    Args:
        level: Minimum level the handler emits.
        color: When False, Rich output is uncolored.
        show_path: Show the emitting file and line next to each record.
    """
    console = Console(stderr=True, no_color=not color, highlight=False)
    handler = RichHandler(
        level=level,
        console=console,
        markup=False,
        rich_tracebacks=True,
        show_time=False,
        show_path=show_path,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler.set_name(HANDLER_NAME)
    return handler


def remove_console_handler() -> None:
    """Detach and close the handler installed by `configure_logging`, if any."""
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in library_logger.handlers[:]:
        if handler.name == HANDLER_NAME:
            library_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    level: int | None = None,
    *,
    color: bool = True,
    show_path: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> RichHandler:
    """Show CONCORDANCE's log records on the console.

    Args:
        level: Console level. Defaults to ``CONCORDANCE_LOG_LEVEL``.
        color: Forwarded to `console_handler`.
        show_path: Forwarded to `console_handler`.
        logger_levels: Per-logger level overrides, applied after the library
            logger's level so an explicit ``concordance`` entry wins.
            Defaults to ``CONCORDANCE_LOGGER_LEVELS``.

    Returns:
        The handler attached to the ``concordance`` logger.

    Raises:
        InvalidLogLevelError: If a level read from the environment is invalid.
    """
    if level is None:
        level = get_log_level()
    if logger_levels is None:
        logger_levels = get_logger_levels()

    remove_console_handler()
    handler = console_handler(level, color=color, show_path=show_path)
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    logger.debug(
        "Console logging at %s, overrides: %s",
        logging.getLevelName(level),
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
    return handler
