# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Runtime-specific variable sources."""

from abc import ABC, abstractmethod
from typing import Any, MutableMapping, Optional

from .exceptions import UnsupportedRuntimeError
from .host import resolve_scope
from .runtimes import Runtime


class VariableSource(ABC):
    """Abstract base class for runtime variable lookups."""

    @abstractmethod
    def get(self, name: Optional[str]) -> Any:
        """Get the raw value of a variable, or None if it is not set."""
        raise NotImplementedError


class ProcessEnvSource(VariableSource):
    """Reads ``process.env`` on the server runtime."""

    def __init__(self, process: Any):
        self._environ = process.env

    def get(self, name: Optional[str]) -> Any:
        if not name:
            return None
        return self._environ.get(name)


class DenoEnvSource(VariableSource):
    """Reads ``Deno.env.get(name)`` on the secure-scripting runtime."""

    def __init__(self, deno: Any):
        self._env = deno.env

    def get(self, name: Optional[str]) -> Any:
        if not name:
            return None
        return self._env.get(name)


class WorkerGlobalSource(VariableSource):
    """Reads variables bound directly in the worker's global scope."""

    def __init__(self, scope: MutableMapping[str, Any]):
        self._scope = scope

    def get(self, name: Optional[str]) -> Any:
        if not name:
            return None
        return self._scope.get(name)


def create_variable_source(
    runtime: Any,
    scope: Optional[MutableMapping[str, Any]] = None,
) -> VariableSource:
    """Create the variable source for a runtime.

    Args:
        runtime: Runtime (or runtime name) to read variables from
        scope: Host scope holding the runtime globals

    Returns:
        VariableSource instance

    Raises:
        UnsupportedRuntimeError: If runtime is not recognized
    """
    runtime = Runtime.parse(runtime)
    scope = resolve_scope(scope)

    if runtime is Runtime.NODE:
        return ProcessEnvSource(scope["process"])
    if runtime is Runtime.DENO:
        return DenoEnvSource(scope["Deno"])
    if runtime is Runtime.WORKER:
        return WorkerGlobalSource(scope)

    raise UnsupportedRuntimeError(f"Unknown runtime: {runtime}")
