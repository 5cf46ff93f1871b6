"""Utility modules for Puma.

Provides:
- logger: get_logger for logging
"""

from puma.utils.logger import get_logger

__all__ = ["get_logger"]
