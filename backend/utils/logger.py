"""Application logger: one "smartstore" logger, level from LOG_LEVEL."""
import logging
import os

ROOT_NAME = "smartstore"

_root = logging.getLogger(ROOT_NAME)
if not _root.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    _root.addHandler(handler)
    _root.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    _root.propagate = False

def get_logger(name=None):
    """The shared logger, or a child of it (``smartstore.<name>``)."""
    return _root.getChild(name) if name else _root
