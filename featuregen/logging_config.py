"""Logging setup shared by the library and the command line host.

Library modules only call ``get_logger(__name__)``; nothing is emitted until
the host calls ``setup_logging()``.
"""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "featuregen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The logger instance.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.WARNING, rich_output: bool = True) -> None:
    """Attach a handler to the package logger.

    Repeated calls only adjust the level.

    Args:
        level: Logging level name or number.
        rich_output: Use ``RichHandler``; otherwise a plain stream handler.
    """
    global _configured

    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level)

    if _configured:
        return

    if rich_output:
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True, show_path=False, markup=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )

    root.addHandler(handler)
    _configured = True
