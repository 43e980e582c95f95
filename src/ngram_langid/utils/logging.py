"""Colored single-line logging for the detector and its CLI.

Every module logs through a child of the `ngram_langid` logger; only the
package logger owns a handler, so a level set once applies everywhere.
Lines carry the short module name: `[12:00:01] detector: Registered 2 language(s)`.
"""

import logging
import sys
from datetime import datetime

GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
DIM = "\x1b[2m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"

PACKAGE_LOGGER = "ngram_langid"


class DetectorFormatter(logging.Formatter):
    LEVEL_COLORS = {
        logging.DEBUG: DIM,
        logging.INFO: "",
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: RED + BOLD,
    }

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        color = self.LEVEL_COLORS.get(record.levelno, "")
        source = ""
        if record.name.startswith(PACKAGE_LOGGER + "."):
            source = f"{DIM}{record.name.rsplit('.', 1)[-1]}:{RESET} "
        return f"{DIM}[{ts}]{RESET} {source}{color}{record.getMessage()}{RESET}"


def get_logger(name: str = PACKAGE_LOGGER, level: str | None = None) -> logging.Logger:
    """Logger for a module of this package; level, when given, applies package-wide."""
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(DetectorFormatter())
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if level is not None:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logging.getLogger(name)
