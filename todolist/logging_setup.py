"""
FILE: todolist/logging_setup.py
PURPOSE: Root logger configuration for CLI and REPL
EXPORTS:
  - setup_logging(level, log_file) -> None
DEPENDENCIES:
  - logging, sys, pathlib (stdlib)
NOTES:
  - Console handler goes to stderr so it never mixes with table output
  - Third-party loggers only reach the console at ERROR+
  - Call once, early, before the first log line
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


class _ConsoleNoiseFilter(logging.Filter):
    """Keep todolist logs; hide third-party chatter (prompt_toolkit, asyncio) below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "todolist" or record.name.startswith("todolist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure logging with:
    - Console handler: stderr, filtered, at `level`
    - File handler (optional): everything at DEBUG
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_file else level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
