# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Declarative mapping of internal env keys to runtime-specific variables.

Each internal name maps either to a string (the variable is named the same on
every runtime) or to a table that names it per runtime (``node``, ``deno``,
``worker``), optionally with an ``all`` fallback and a ``type`` other than
string.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from .exceptions import EnvSchemaError

DEFAULT_TYPE = "string"
ALL_RUNTIMES = "all"

ENV_VAR_MAPPINGS: Dict[str, Union[str, Dict[str, str]]] = {
    "runTime": "RUNTIME",
    "runTimeEnv": {
        "worker": "WORKER_ENV",
        "node": "NODE_ENV",
        "deno": "DENO_ENV",
    },
    "cloudPlatform": "CLOUD_PLATFORM",
    "logLevel": "LOG_LEVEL",
    "blocklistUrl": "CF_BLOCKLIST_URL",
    "latestTimestamp": "CF_LATEST_BLOCKLIST_TIMESTAMP",
    "dnsResolverUrl": "CF_DNS_RESOLVER_URL",
    "onInvalidFlagStopProcessing": {
        "type": "boolean",
        "all": "CF_ON_INVALID_FLAG_STOPPROCESSING",
    },
    # wait timeout for parallel blocklist downloads
    "fetchTimeout": {
        "type": "number",
        "all": "CF_BLOCKLIST_DOWNLOAD_TIMEOUT",
    },
    # trie file split
    "tdNodecount": {
        "type": "number",
        "all": "TD_NODE_COUNT",
    },
    "tdParts": {
        "type": "number",
        "all": "TD_PARTS",
    },
    # the Cache API only exists on workers, so other runtimes resolve this to False
    "isAggCacheReq": {
        "type": "boolean",
        "worker": "IS_AGGRESSIVE_CACHE_REQ",
    },
}


@dataclass(frozen=True)
class StringMapping:
    """A variable named the same on every runtime, read as a string."""
    name: str

    @property
    def value_type(self) -> str:
        return DEFAULT_TYPE

    def external_name(self, runtime: str) -> Optional[str]:
        return self.name


@dataclass(frozen=True)
class TypedMapping:
    """A variable with per-runtime names, an optional fallback and a type tag."""
    value_type: str = DEFAULT_TYPE
    names: Mapping[str, str] = field(default_factory=dict)
    fallback: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))

    def external_name(self, runtime: str) -> Optional[str]:
        """Fallback name if present, else the runtime's own name, else None."""
        if self.fallback:
            return self.fallback
        return self.names.get(runtime)


EnvMapping = Union[StringMapping, TypedMapping]


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single internal env key."""
    key: str
    mapping: EnvMapping

    @property
    def value_type(self) -> str:
        return self.mapping.value_type

    def external_name(self, runtime: str) -> Optional[str]:
        return self.mapping.external_name(runtime)


@dataclass(frozen=True)
class EnvSchema:
    """Ordered, read-only table of env key specifications."""
    entries: Mapping[str, EnvVarSpec] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnvSchema":
        """Create an EnvSchema from a mapping literal.

        Args:
            data: Internal key to mapping, in declaration order

        Returns:
            EnvSchema instance

        Raises:
            EnvSchemaError: If a mapping is neither a string nor a table
        """
        entries = {}
        for key, mapping in data.items():
            entries[key] = EnvVarSpec(key=key, mapping=cls._parse_mapping(key, mapping))
        return cls(entries=entries)

    @staticmethod
    def _parse_mapping(key: str, mapping: Any) -> EnvMapping:
        if isinstance(mapping, str):
            return StringMapping(name=mapping)

        if isinstance(mapping, dict):
            names = {
                runtime: name
                for runtime, name in mapping.items()
                if runtime not in ("type", ALL_RUNTIMES)
            }
            return TypedMapping(
                value_type=mapping.get("type") or DEFAULT_TYPE,
                names=names,
                fallback=mapping.get(ALL_RUNTIMES),
            )

        raise EnvSchemaError(f"Unfamiliar mapping for '{key}': {mapping!r}")

    def __iter__(self) -> Iterator[EnvVarSpec]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> EnvVarSpec:
        return self.entries[key]

    def keys(self) -> list[str]:
        return list(self.entries)


ENV_SCHEMA = EnvSchema.from_dict(ENV_VAR_MAPPINGS)
