"""Runtime logging helpers."""

from logging import Handler
from typing import Optional

from loguru import logger
from rich.logging import RichHandler

from .config import load_environment_variables
from .ui import console

_CONFIGURED_LEVEL: Optional[str] = None


def _build_handler() -> Handler:
    return RichHandler(
        console=console,
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure process-level logging once per level."""
    global _CONFIGURED_LEVEL

    if level is None:
        level = load_environment_variables().get("log_level", "WARNING")
    level = str(level).upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        _build_handler(),
        level=level,
        format="{message}",
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = level
