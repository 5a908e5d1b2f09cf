# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Lookup and coercion pass over the env schema."""

import math
import re
from typing import Any, Dict, MutableMapping, Optional, Union

from .exceptions import EnvSchemaError
from .host import resolve_scope
from .logger import Logger
from .logging_factory import get_logger
from .runtimes import Runtime
from .schema import ENV_SCHEMA, EnvSchema
from .sources import VariableSource, create_variable_source

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def is_truthy(value: Any) -> bool:
    """Truthiness of a raw variable value; NaN counts as false."""
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_number(value: Any) -> Union[int, float]:
    """Parse a raw variable value as a number.

    Absent or non-numeric input yields NaN rather than a default; callers
    must guard against it. Blank strings parse to 0.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0

    prefix = text[:2].lower()
    if prefix in _RADIX_PREFIXES:
        digits = text[2:]
        if not (digits.isascii() and digits.isalnum()):
            return math.nan
        try:
            return int(digits, _RADIX_PREFIXES[prefix])
        except ValueError:
            return math.nan

    if _INFINITY_RE.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    if _INT_RE.fullmatch(text):
        return int(text)
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return math.nan


def coerce_value(value: Any, value_type: str) -> Any:
    """Coerce a raw variable value to the schema type.

    Raises:
        EnvSchemaError: If value_type is not string, boolean or number
    """
    if value_type == "boolean":
        return is_truthy(value)
    if value_type == "number":
        return to_number(value)
    if value_type == "string":
        return value if is_truthy(value) else ""
    raise EnvSchemaError(f"Unsupported type: {value_type}")


def resolve_all(
    runtime: Any,
    scope: Optional[MutableMapping[str, Any]] = None,
    schema: Optional[EnvSchema] = None,
    source: Optional[VariableSource] = None,
    logger: Optional[Logger] = None,
) -> Dict[str, Any]:
    """Resolve every schema entry for a runtime.

    Args:
        runtime: Runtime (or runtime name) to read variables from
        scope: Host scope holding the runtime globals
        schema: Schema to resolve (defaults to ENV_SCHEMA)
        source: Variable source override (defaults to the runtime's source)
        logger: Logger for load messages

    Returns:
        Internal key to coerced value, in schema order

    Raises:
        UnsupportedRuntimeError: If runtime is not recognized
        EnvSchemaError: If an entry declares an unsupported type
    """
    runtime = Runtime.parse(runtime)
    schema = schema if schema is not None else ENV_SCHEMA
    logger = logger or get_logger(__name__)

    logger.info("Loading env from runtime", runtime=runtime.value)

    if source is None:
        source = create_variable_source(runtime, resolve_scope(scope))

    env = {}
    for spec in schema:
        raw = source.get(spec.external_name(runtime))
        env[spec.key] = coerce_value(raw, spec.value_type)

    return env
