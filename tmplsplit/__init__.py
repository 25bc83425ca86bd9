"""tmplsplit - Template renderer that splits its output into files.

Rendered text drives its own layout through ``# config`` and ``# file:``
directives and ``---`` document separators.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
