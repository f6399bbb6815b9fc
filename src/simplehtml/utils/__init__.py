"""Utility modules for simplehtml.

Provides:
- text: repeat_string for spacing helpers
- logger: get_logger for logging
"""

from simplehtml.utils.logger import get_logger
from simplehtml.utils.text import repeat_string

__all__ = [
    "get_logger",
    "repeat_string",
]
