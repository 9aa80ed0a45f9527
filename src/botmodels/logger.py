import logging
import sys

from .config import LOG_LEVEL

_ROOT = "botmodels"
_configured = False


def _configure():
    global _configured
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s", "%Y-%m-%d %H:%M:%S")
        )
        root.addHandler(handler)
    root.setLevel(LOG_LEVEL.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger under the botmodels namespace, e.g. get_logger("data.loader")."""
    if not _configured:
        _configure()
    return logging.getLogger(f"{_ROOT}.{name}")
