# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for the env schema."""

from dataclasses import FrozenInstanceError

import pytest

from runtime_env import (
    ENV_SCHEMA,
    ENV_VAR_MAPPINGS,
    EnvSchema,
    EnvSchemaError,
    Runtime,
    StringMapping,
    TypedMapping,
)


class TestEnvSchema:
    """Tests for EnvSchema parsing."""

    def test_keys_follow_declaration_order(self):
        """Test that schema keys keep the literal's order."""
        assert ENV_SCHEMA.keys() == list(ENV_VAR_MAPPINGS)
        assert ENV_SCHEMA.keys()[0] == "runTime"
        assert ENV_SCHEMA.keys()[-1] == "isAggCacheReq"

    def test_string_mapping(self):
        """Test that a plain string becomes a StringMapping."""
        spec = ENV_SCHEMA["logLevel"]

        assert spec.mapping == StringMapping(name="LOG_LEVEL")
        assert spec.value_type == "string"

    def test_typed_mapping(self):
        """Test that a table becomes a TypedMapping."""
        spec = ENV_SCHEMA["fetchTimeout"]

        assert isinstance(spec.mapping, TypedMapping)
        assert spec.value_type == "number"
        assert spec.mapping.fallback == "CF_BLOCKLIST_DOWNLOAD_TIMEOUT"
        assert spec.mapping.names == {}

    def test_table_without_type_defaults_to_string(self):
        """Test that a per-runtime table without a type is a string."""
        assert ENV_SCHEMA["runTimeEnv"].value_type == "string"

    def test_unfamiliar_mapping_raises(self):
        """Test that a mapping that is neither str nor dict is rejected."""
        with pytest.raises(EnvSchemaError, match="Unfamiliar mapping"):
            EnvSchema.from_dict({"broken": 42})

    def test_unknown_type_is_kept_until_lookup(self):
        """Test that type tags are not validated while parsing."""
        schema = EnvSchema.from_dict({"odd": {"type": "date", "all": "ODD"}})

        assert schema["odd"].value_type == "date"

    def test_schema_is_read_only(self):
        """Test that the schema and its entries cannot be mutated."""
        with pytest.raises(TypeError):
            ENV_SCHEMA.entries["extra"] = ENV_SCHEMA["logLevel"]
        with pytest.raises(FrozenInstanceError):
            ENV_SCHEMA.entries = {}
        with pytest.raises(TypeError):
            ENV_SCHEMA["runTimeEnv"].mapping.names["bun"] = "BUN_ENV"
        assert "extra" not in ENV_SCHEMA

    def test_from_dict_does_not_alias_input(self):
        data = {"a": "A"}
        schema = EnvSchema.from_dict(data)
        data["b"] = "B"

        assert schema.keys() == ["a"]

    def test_container_protocol(self):
        """Test len, membership and iteration."""
        assert len(ENV_SCHEMA) == len(ENV_VAR_MAPPINGS)
        assert "tdParts" in ENV_SCHEMA
        assert "missing" not in ENV_SCHEMA
        assert [spec.key for spec in ENV_SCHEMA] == ENV_SCHEMA.keys()


class TestExternalName:
    """Tests for runtime-specific name resolution."""

    @pytest.mark.parametrize("runtime", list(Runtime))
    def test_string_mapping_same_on_every_runtime(self, runtime):
        """Test that string mappings ignore the runtime."""
        for spec in ENV_SCHEMA:
            if isinstance(spec.mapping, StringMapping):
                assert spec.external_name(runtime) == spec.mapping.name

    @pytest.mark.parametrize("runtime", list(Runtime))
    def test_all_fallback_wins_on_every_runtime(self, runtime):
        """Test that the all fallback is used whatever the runtime."""
        for spec in ENV_SCHEMA:
            if isinstance(spec.mapping, TypedMapping) and spec.mapping.fallback:
                assert spec.external_name(runtime) == spec.mapping.fallback

    def test_all_fallback_preferred_over_runtime_name(self):
        """Test that all beats a runtime-specific name."""
        schema = EnvSchema.from_dict({"k": {"node": "NODE_K", "all": "ALL_K"}})

        assert schema["k"].external_name(Runtime.NODE) == "ALL_K"

    def test_per_runtime_names(self):
        """Test per-runtime names are picked by runtime."""
        spec = ENV_SCHEMA["runTimeEnv"]

        assert spec.external_name(Runtime.WORKER) == "WORKER_ENV"
        assert spec.external_name(Runtime.NODE) == "NODE_ENV"
        assert spec.external_name("deno") == "DENO_ENV"

    def test_missing_runtime_name_is_none(self):
        """Test that a runtime without a name resolves to None."""
        spec = ENV_SCHEMA["isAggCacheReq"]

        assert spec.external_name(Runtime.WORKER) == "IS_AGGRESSIVE_CACHE_REQ"
        assert spec.external_name(Runtime.NODE) is None
        assert spec.external_name(Runtime.DENO) is None
