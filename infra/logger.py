from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

# Simple, centralized logging setup. Console output goes to stderr: stdout
# carries the simulation results.
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","line":%(lineno)d,"msg":"%(message)s"}'
)


def configure_logging(
    level: Union[str, int] = "WARNING",
    *,
    json: bool = False,
    logfile: str | Path | None = None,
) -> None:
    """
    Configure the root logger with stderr + optional file handler.

    Args:
        level: Logging level name or int (e.g., "DEBUG", logging.INFO).
        json: Emit JSON lines when True; otherwise a human-friendly format.
        logfile: File path to append logs; None disables file output.
    """
    fmt = JSON_FORMAT if json else DEFAULT_FORMAT
    formatter = logging.Formatter(fmt)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    handlers.append(console)

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in handlers:
        root.addHandler(handler)

    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)


# Usage: from infra.logger import configure_logging, get_logger; configure_logging("DEBUG"); log = get_logger(__name__); log.info("ready")
