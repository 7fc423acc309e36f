"""Utility modules for exprlex.

Provides:
- logger: get_logger for namespaced logging
"""

from exprlex.utils.logger import get_logger

__all__ = ["get_logger"]
