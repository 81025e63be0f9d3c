"""Logging setup shared by the store and the demo script.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger. It is a no-op when the root logger already
has handlers, so calling it from tests or repeated script runs is safe.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: str | None = None) -> bool:
    """Configure the root logger once.

    Returns True when handlers were attached, False when the root logger
    was already configured. Unknown level names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return True
