# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Detection of the host runtime."""

from enum import Enum
from typing import Any, MutableMapping, Optional

from .exceptions import UndetectedRuntimeError, UnsupportedRuntimeError
from .host import resolve_scope


class Runtime(str, Enum):
    """Runtime kinds that can host the service."""
    NODE = "node"
    DENO = "deno"
    WORKER = "worker"

    @classmethod
    def parse(cls, value: Any) -> "Runtime":
        """Coerce a runtime name into a Runtime.

        Raises:
            UnsupportedRuntimeError: If the name is not a known runtime
        """
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedRuntimeError(f"Unknown runtime: {value}") from None


def detect_runtime(scope: Optional[MutableMapping[str, Any]] = None) -> Runtime:
    """Detect the runtime from the globals bound in the host scope.

    Workers may also expose ``process``, so the worker flag is checked first.

    Args:
        scope: Host scope to inspect (defaults to the process-wide scope)

    Returns:
        Detected Runtime

    Raises:
        UndetectedRuntimeError: If no known runtime globals are present
    """
    scope = resolve_scope(scope)

    if scope.get("RUNTIME") == Runtime.WORKER.value:
        return Runtime.WORKER
    if "Deno" in scope:
        return Runtime.DENO
    if "process" in scope:
        return Runtime.NODE

    raise UndetectedRuntimeError(
        "No runtime detected: expected RUNTIME=worker, Deno or process in host scope"
    )
