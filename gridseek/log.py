"""Logging setup shared by the CLI and the TUI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "gridseek-rich"


def configure_logging(level: str | int = "WARNING") -> None:
    numeric = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    root = logging.getLogger()
    root.setLevel(numeric)
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
