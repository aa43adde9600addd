"""
Observability module.

Provides logging configuration and correlation ID tracking.
"""

from docqa.observability.correlation import get_correlation_id, set_correlation_id
from docqa.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
