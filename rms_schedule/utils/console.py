# rms_schedule/utils/console.py
import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)
logger = logging.getLogger("rms_schedule")

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure(level: str) -> None:
    """Route the package logger through rich; DEBUG shows per-page requests."""
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, markup=True, show_path=False))
        logger.propagate = False
    name = (level or "INFO").upper()
    logger.setLevel(name if name in _LEVELS else "INFO")


def debug(msg: str) -> None:
    logger.debug(f"[dim]{msg}[/dim]")


def info(msg: str) -> None:
    logger.info(msg)


def warn(msg: str) -> None:
    logger.warning(f"[yellow]⚠️ {msg}[/yellow]")


def error(msg: str) -> None:
    logger.error(f"[red]❌ {msg}[/red]")
