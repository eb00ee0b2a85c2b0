from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import PATHWALK_CONFIG

LOGGER_NAME = "pathwalk"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _PathwalkRichConsoleHandler(logging.Handler):
    """Console handler rendering ``LEVEL message [file:line]`` through rich."""

    def __init__(self, level: int = logging.NOTSET, console: Console | None = None) -> None:
        super().__init__(level)
        self.console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        text = Text()
        text.append(f"{record.levelname:<8}", style=_LEVEL_STYLES.get(record.levelname))
        text.append(" ")
        text.append(record.getMessage())
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self._format_message_text(record)
            text.append(" ")
            text.append(self._format_location(record), style="dim")
            self.console.print(text, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach the rich console handler to the ``pathwalk`` logger.

    Safe to call repeatedly: at most one handler is installed. The level
    defaults to ``PATHWALK_CONFIG.log_level``.
    """

    logger = get_logger()
    resolved = level if level is not None else PATHWALK_CONFIG.log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    if not any(isinstance(h, _PathwalkRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(_PathwalkRichConsoleHandler())
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
