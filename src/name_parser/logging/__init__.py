"""
Logging package for ``name_parser``.

Use ``get_logger(__name__)`` in modules; entry points call
``configure_logging()`` once to attach the console and file handlers.
"""

from .logger import (
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
]
