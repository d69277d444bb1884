"""
Utilities package for Interview Analytics.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from interview_analytics.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
