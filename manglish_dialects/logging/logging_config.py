"""Logging configuration for Manglish Dialects.

@public

Package loggers are Prefect loggers: ``get_pipeline_logger("manglish_dialects.llm")``
returns the ``prefect.manglish_dialects.llm`` logger, so the default
configuration is keyed under the ``prefect.`` namespace. A YAML file in
``logging.config.dictConfig`` format replaces the defaults entirely.

Usage:
    >>> from manglish_dialects.logging import get_pipeline_logger
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Translation started")

Environment variables:
    MANGLISH_DIALECTS_LOGGING_CONFIG: Path to a logging YAML file
    PREFECT_LOGGING_SETTINGS_PATH: Fallback path, shared with Prefect
    MANGLISH_DIALECTS_LOG_LEVEL: Level of the package root logger (default INFO)
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

PREFECT_NAMESPACE = "prefect"

# Per-component levels for the default configuration; keys are package logger names.
DEFAULT_LOG_LEVELS = {
    "manglish_dialects": "INFO",
    "manglish_dialects.llm": "INFO",
    "manglish_dialects.flows": "INFO",
    "manglish_dialects.prompt_compiler": "WARNING",
}

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def _prefect_name(name: str) -> str:
    return f"{PREFECT_NAMESPACE}.{name}"


class LoggingConfig:
    """Resolves, loads and applies the logging configuration.

    @public

    The file path is taken from ``config_path``, then
    ``MANGLISH_DIALECTS_LOGGING_CONFIG``, then ``PREFECT_LOGGING_SETTINGS_PATH``.
    With no path, or a path that does not exist, the built-in defaults apply.
    The loaded configuration is cached per instance.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._path_from_env()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _path_from_env() -> Optional[Path]:
        for var in ("MANGLISH_DIALECTS_LOGGING_CONFIG", "PREFECT_LOGGING_SETTINGS_PATH"):
            if value := os.environ.get(var):
                return Path(value)
        return None

    def load_config(self) -> Dict[str, Any]:
        """Return the dictConfig mapping, reading the YAML file on first call.

        Raises:
            ValueError: If the YAML file does not contain a mapping.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    loaded = yaml.safe_load(f)
                if not isinstance(loaded, dict):
                    raise ValueError(f"Logging config {self.config_path} must be a YAML mapping")
                self._config = loaded
            else:
                self._config = self.default_config()
        return self._config

    @staticmethod
    def default_config() -> Dict[str, Any]:
        """Console output for the package loggers; WARNING for everything else."""
        root_level = os.environ.get("MANGLISH_DIALECTS_LOG_LEVEL", DEFAULT_LOG_LEVELS["manglish_dialects"])
        loggers: Dict[str, Any] = {
            _prefect_name("manglish_dialects"): {
                "level": root_level,
                "handlers": ["console"],
                "propagate": False,
            },
        }
        for name, level in DEFAULT_LOG_LEVELS.items():
            if name != "manglish_dialects":
                loggers[_prefect_name(name)] = {"level": level}

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"standard": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": loggers,
            "root": {"level": "WARNING", "handlers": ["console"]},
        }

    def apply(self):
        """Apply the configuration; a ``prefect`` logger entry also seeds ``PREFECT_LOGGING_LEVEL``."""
        config = self.load_config()
        logging.config.dictConfig(config)

        if prefect_logger := config.get("loggers", {}).get(PREFECT_NAMESPACE):
            os.environ.setdefault("PREFECT_LOGGING_LEVEL", prefect_logger.get("level", "INFO"))


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Configure package logging.

    @public

    Args:
        config_path: Optional YAML file in dictConfig format.
        level: Optional level forced onto every package logger.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for name in DEFAULT_LOG_LEVELS:
            get_logger(name).setLevel(level)
        os.environ["PREFECT_LOGGING_LEVEL"] = level


def get_pipeline_logger(name: str):
    """Return the Prefect logger for ``name``, configuring logging on first use.

    @public
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
