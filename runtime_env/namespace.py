# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Process-wide, read-only view of the loaded env."""

from typing import Any, Dict, Iterator, MutableMapping, Optional

from .exceptions import EnvNotInitializedError
from .host import resolve_scope

NAMESPACE_NAME = "env"


class EnvNamespace:
    """Attribute-only, read-only view of the loaded env.

    The owning EnvManager replaces the snapshot wholesale on every load and
    set; everyone else only reads it.

    Example:
        >>> env = current_env()
        >>> env.logLevel
        'debug'
        >>> env.logLevel = "info"
        AttributeError: Cannot modify env. 'logLevel' is read-only.
    """

    def __init__(self, snapshot: Optional[Dict[str, Any]] = None):
        object.__setattr__(self, '_snapshot', dict(snapshot or {}))

    def _publish(self, snapshot: Dict[str, Any]) -> None:
        object.__setattr__(self, '_snapshot', dict(snapshot))

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        snapshot = object.__getattribute__(self, '_snapshot')
        if name not in snapshot:
            raise AttributeError(
                f"Env key '{name}' not found. "
                f"Available keys: {sorted(snapshot.keys())}"
            )
        return snapshot[name]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"Cannot modify env. '{name}' is read-only. "
            "Use EnvManager.set() instead."
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete env key '{name}'.")

    def __getitem__(self, key: str) -> Any:
        raise TypeError(
            f"EnvNamespace does not support dict-style access (env['{key}']). "
            f"Use attribute-style instead: env.{key}"
        )

    def __contains__(self, key: object) -> bool:
        return key in object.__getattribute__(self, '_snapshot')

    def __iter__(self) -> Iterator[str]:
        return iter(list(object.__getattribute__(self, '_snapshot')))

    def __len__(self) -> int:
        return len(object.__getattribute__(self, '_snapshot'))

    def to_dict(self) -> Dict[str, Any]:
        """Copy of the current snapshot, in insertion order."""
        return dict(object.__getattribute__(self, '_snapshot'))

    def __repr__(self) -> str:
        return f"EnvNamespace({object.__getattribute__(self, '_snapshot')!r})"

    def __dir__(self) -> list:
        return sorted(object.__getattribute__(self, '_snapshot').keys())


def current_env(scope: Optional[MutableMapping[str, Any]] = None) -> EnvNamespace:
    """Return the env namespace published in the host scope.

    Raises:
        EnvNotInitializedError: If no EnvManager has been constructed
    """
    scope = resolve_scope(scope)
    if NAMESPACE_NAME not in scope:
        raise EnvNotInitializedError("env is not initialized; construct an EnvManager first")
    return scope[NAMESPACE_NAME]
