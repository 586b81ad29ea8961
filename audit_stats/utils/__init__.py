"""Utilities for audit statistics.

NOTE: Keep this package lightweight; it is imported by the core modules.
"""

from audit_stats.utils.logging import get_logger

__all__ = ["get_logger"]
