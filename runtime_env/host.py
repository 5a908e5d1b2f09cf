# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Process-wide host scope.

The host scope plays the role of the runtime's global object. Embedding hosts
bind their globals here before loading the environment:

- server runtime: ``process`` with an ``env`` mapping (bound by default)
- secure-scripting runtime: ``Deno`` with an ``env.get(name)`` accessor
- worker runtime: ``RUNTIME = "worker"`` plus every variable bound by name
"""

import os
from typing import Any, Mapping, MutableMapping, Optional


class ProcessHandle:
    """Server runtime ``process`` global exposing the environment table."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.env = environ if environ is not None else os.environ

    def __repr__(self) -> str:
        return f"ProcessHandle(env=<{len(self.env)} variables>)"


def default_scope() -> dict[str, Any]:
    """Build the scope of a plain Python process."""
    return {"process": ProcessHandle()}


host_scope: dict[str, Any] = default_scope()


def resolve_scope(scope: Optional[MutableMapping[str, Any]] = None) -> MutableMapping[str, Any]:
    """Return the given scope, or the process-wide host scope."""
    return host_scope if scope is None else scope
