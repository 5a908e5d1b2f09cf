# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Load-once manager for the process-wide env namespace.

Constructing an EnvManager publishes an ``env`` namespace in the host scope.
Only one manager may exist per scope; ``EnvManager.get()`` and
``EnvManager.set()`` read and write the namespace, and ``load_env()`` fills it
from the detected runtime.
"""

import math
import threading
from typing import Any, Dict, MutableMapping, Optional

from .exceptions import SingletonViolationError
from .host import resolve_scope
from .loader import resolve_all, to_number
from .logger import Logger
from .logging_factory import get_logger
from .namespace import NAMESPACE_NAME, EnvNamespace
from .runtimes import Runtime, detect_runtime
from .schema import ENV_SCHEMA, EnvSchema

WORKER_TIMEOUT_KEY = "workerTimeout"


class EnvManager:
    """Owns the loaded env values and publishes them to the host scope."""

    def __init__(
        self,
        scope: Optional[MutableMapping[str, Any]] = None,
        schema: Optional[EnvSchema] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the env manager.

        Args:
            scope: Host scope to publish into (defaults to the process-wide scope)
            schema: Env schema (defaults to ENV_SCHEMA)
            logger: Logger for load messages

        Raises:
            SingletonViolationError: If the scope already has an env namespace
        """
        self._scope = resolve_scope(scope)
        if NAMESPACE_NAME in self._scope:
            raise SingletonViolationError("EnvManager is already initialized.")

        self._schema = schema if schema is not None else ENV_SCHEMA
        self._logger = logger or get_logger(__name__)
        self._env_map: Dict[str, Any] = {}
        self._lock = threading.RLock()
        self.is_loaded = False
        self.runtime: Optional[Runtime] = None

        # bind last so a failed constructor leaves the scope untouched
        self._namespace = EnvNamespace()
        self._scope[NAMESPACE_NAME] = self._namespace

    def load_env(self) -> EnvNamespace:
        """Load env values from the runtime and publish them.

        Existing values with the same keys are overwritten.

        Returns:
            The published env namespace

        Raises:
            UndetectedRuntimeError: If no runtime can be detected
            UnsupportedRuntimeError: If the runtime is not recognized
            EnvSchemaError: If the schema declares an unsupported type
        """
        with self._lock:
            runtime = detect_runtime(self._scope)
            env = resolve_all(runtime, self._scope, schema=self._schema, logger=self._logger)
            self._env_map.update(env)

            # overall worker timeout covers the blocklist download as well
            if runtime is Runtime.WORKER:
                timeout = (
                    to_number(self._scope.get("WORKER_TIMEOUT"))
                    + to_number(self._scope.get("CF_BLOCKLIST_DOWNLOAD_TIMEOUT"))
                )
                # keep the shared NaN so repeated loads compare equal
                self._env_map[WORKER_TIMEOUT_KEY] = math.nan if math.isnan(timeout) else timeout

            self._logger.debug("Loaded env", runtime=runtime.value, env=self.to_object())

            self._publish()
            self.runtime = runtime
            self.is_loaded = True
            return self._namespace

    def get_map(self) -> Dict[str, Any]:
        """Return the live, ordered store of env values."""
        return self._env_map

    def to_object(self) -> Dict[str, Any]:
        """Return a copy of the loaded env values, in insertion order."""
        return dict(self._env_map)

    def get(self, key: str, default: Any = None) -> Any:
        """Get an env value, or default if it was never loaded or set."""
        return self._env_map.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set an env value as-is (no coercion) and republish the namespace."""
        with self._lock:
            self._env_map[key] = value
            self._publish()

    @property
    def namespace(self) -> EnvNamespace:
        return self._namespace

    def _publish(self) -> None:
        self._namespace._publish(self._env_map)


def bootstrap(
    scope: Optional[MutableMapping[str, Any]] = None,
    schema: Optional[EnvSchema] = None,
    logger: Optional[Logger] = None,
) -> EnvManager:
    """Construct the process's EnvManager and load the env.

    Call once at startup and pass the returned manager (or its namespace) to
    collaborators.
    """
    manager = EnvManager(scope=scope, schema=schema, logger=logger)
    manager.load_env()
    return manager


def reset_env(scope: Optional[MutableMapping[str, Any]] = None) -> None:
    """Unbind the env namespace from a scope. Intended for tests."""
    resolve_scope(scope).pop(NAMESPACE_NAME, None)
