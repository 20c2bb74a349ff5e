"""Logging utilities.

One log file per run, `<log_dir>/<run_id>.log`, plus a console handler on
stderr. Calling `setup_logging` again (several runs in one process, tests)
replaces the handlers it installed before instead of stacking them.
"""

from __future__ import annotations
import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_installed: list = []

def setup_logging(log_dir: str, run_id: str, level: int = logging.INFO) -> str:
    """Configure root logging for a producer run and return the log file path."""
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"{run_id}.log")

    root = logging.getLogger()
    root.setLevel(level)
    while _installed:
        h = _installed.pop()
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)
    for h in (logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler()):
        h.setFormatter(fmt)
        root.addHandler(h)
        _installed.append(h)
    return log_path
