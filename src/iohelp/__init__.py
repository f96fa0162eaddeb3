"""File-system convenience helpers: open, create, read, write, check, and decompose paths."""

import logging

from iohelp import creating, existing, info, opening, pathing, reading, writing
from iohelp.errors import MissingFileError
from iohelp.info import Info
from iohelp.log import enable_logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Info",
    "MissingFileError",
    "__version__",
    "creating",
    "enable_logging",
    "existing",
    "info",
    "opening",
    "pathing",
    "reading",
    "writing",
]
