"""Utility modules for parsecomb.

Provides:
- logger: get_logger for namespaced loggers, preview for quoting input
"""

from parsecomb.utils.logger import get_logger, preview

__all__ = [
    "get_logger",
    "preview",
]
