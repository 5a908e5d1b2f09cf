# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions for runtime environment loading."""


class EnvError(Exception):
    """Base exception for runtime environment errors."""
    pass


class EnvSchemaError(EnvError):
    """Raised when a schema entry has an unfamiliar mapping or type tag."""
    pass


class UnsupportedRuntimeError(EnvError):
    """Raised when values are fetched for a runtime that is not recognized."""
    pass


class UndetectedRuntimeError(EnvError):
    """Raised when no known runtime can be detected from the host scope."""
    pass


class SingletonViolationError(EnvError):
    """Raised when a second EnvManager is constructed for the same scope."""
    pass


class EnvNotInitializedError(EnvError):
    """Raised when the published namespace is read before a manager exists."""
    pass
