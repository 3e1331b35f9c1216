"""
Utilities and helper functions.

Provides:
- Logging configuration (structlog)
"""

from embed_lite.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
