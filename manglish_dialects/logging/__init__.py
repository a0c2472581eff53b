"""Logging infrastructure for Manglish Dialects.

@public

Prefect-integrated logging configured from YAML or sensible defaults.

Example:
    >>> from manglish_dialects.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Processing started")

Note:
    Never import Python's logging module directly. Always use
    get_pipeline_logger() for consistent configuration.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
]
