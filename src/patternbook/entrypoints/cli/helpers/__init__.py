"""CLI helpers for PATTERNBOOK.

Message emitters that write to stderr with emoji→ASCII fallbacks, OSC-8
terminal hyperlinks when supported, and the ``-L NAME=LEVEL`` parser.
"""

from .hyperlinks import file_link, hyperlink
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "file_link", "hyperlink", "parse_log_level", "success", "warn"]
