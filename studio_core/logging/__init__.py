"""
Logging configuration and utilities for the studio aggregation core.
"""
from .config import configure_logging, get_aggregation_logger, get_logger, log_skipped_event

__all__ = ["configure_logging", "get_aggregation_logger", "get_logger", "log_skipped_event"]
