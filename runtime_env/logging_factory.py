# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating logger instances."""

import os

from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import LEVELS, StdoutLogger

_logger_registry: dict[str, Logger] = {}
_default_logger: Logger | None = None


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Pick an explicit value, then the env var, then the fallback."""
    return (value or os.getenv(env_var) or fallback)


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        logger_type: Type of logger to create. Options: "stdout", "silent".
            Defaults to LOG_TYPE env or "stdout".
        level: Logging level. Options: DEBUG, INFO, WARNING, ERROR.
            Defaults to LOG_LEVEL env or "INFO". Levels the loggers do not
            know (e.g. "timer") fall back to "INFO".
        name: Logger name for identification. Defaults to LOG_NAME env or "runtime-env".

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized

    Example:
        >>> logger = create_logger(logger_type="stdout", level="DEBUG", name="resolver")
        >>> logger.info("Loaded env", runtime="node")
    """
    logger_type = _default(logger_type, "LOG_TYPE", "stdout").lower()
    level = _default(level, "LOG_LEVEL", "INFO").upper()
    if level not in LEVELS:
        level = "INFO"
    name = _default(name, "LOG_NAME", "runtime-env")

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    elif logger_type == "silent":
        return SilentLogger(level=level, name=name)
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: stdout, silent"
        )


def create_stdout_logger(level: str | None = None, name: str | None = None) -> Logger:
    """Shortcut for create_logger(logger_type="stdout")."""
    return create_logger(logger_type="stdout", level=level, name=name)


def set_default_logger(logger: Logger) -> None:
    """Install the logger returned by get_logger for every module."""
    global _default_logger
    _default_logger = logger
    _logger_registry.clear()


def get_logger(name: str) -> Logger:
    """Get the logger for a module.

    Returns the default logger once one is set; otherwise creates a stdout
    logger per name and caches it.
    """
    if _default_logger is not None:
        return _default_logger

    if name not in _logger_registry:
        _logger_registry[name] = create_logger(name=name)
    return _logger_registry[name]
