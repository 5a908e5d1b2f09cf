# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Runtime environment normalization.

Maps internal configuration keys to the variables of whichever runtime hosts
the service (node, deno or worker), coerces them to their declared types and
publishes them as one process-wide ``env`` namespace.

Example:
    >>> from runtime_env import bootstrap, current_env
    >>> manager = bootstrap()
    >>> current_env().logLevel
    'debug'
    >>> manager.set("logLevel", "info")
    >>> current_env().logLevel
    'info'
"""

__version__ = "0.1.0"

from .exceptions import (
    EnvError,
    EnvNotInitializedError,
    EnvSchemaError,
    SingletonViolationError,
    UndetectedRuntimeError,
    UnsupportedRuntimeError,
)
from .host import ProcessHandle, default_scope, host_scope
from .loader import coerce_value, is_truthy, resolve_all, to_number
from .logger import Logger
from .logging_factory import create_logger, create_stdout_logger, get_logger, set_default_logger
from .manager import EnvManager, bootstrap, reset_env
from .namespace import EnvNamespace, current_env
from .runtimes import Runtime, detect_runtime
from .schema import (
    ENV_SCHEMA,
    ENV_VAR_MAPPINGS,
    EnvSchema,
    EnvVarSpec,
    StringMapping,
    TypedMapping,
)
from .silent_logger import SilentLogger
from .sources import (
    DenoEnvSource,
    ProcessEnvSource,
    VariableSource,
    WorkerGlobalSource,
    create_variable_source,
)
from .stdout_logger import StdoutLogger

__all__ = [
    # Version
    "__version__",
    # Manager (the recommended entry point)
    "EnvManager",
    "bootstrap",
    "reset_env",
    "EnvNamespace",
    "current_env",
    # Schema
    "ENV_SCHEMA",
    "ENV_VAR_MAPPINGS",
    "EnvSchema",
    "EnvVarSpec",
    "StringMapping",
    "TypedMapping",
    # Runtimes and sources
    "Runtime",
    "detect_runtime",
    "ProcessHandle",
    "default_scope",
    "host_scope",
    "VariableSource",
    "ProcessEnvSource",
    "DenoEnvSource",
    "WorkerGlobalSource",
    "create_variable_source",
    # Lookup and coercion
    "resolve_all",
    "coerce_value",
    "is_truthy",
    "to_number",
    # Errors
    "EnvError",
    "EnvSchemaError",
    "UnsupportedRuntimeError",
    "UndetectedRuntimeError",
    "SingletonViolationError",
    "EnvNotInitializedError",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    "create_stdout_logger",
    "get_logger",
    "set_default_logger",
]
