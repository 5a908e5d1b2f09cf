# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared fixtures for runtime_env tests."""

import pytest

from runtime_env import ProcessHandle, SilentLogger


class FakeDenoEnv:
    """Stand-in for ``Deno.env``."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.requested = []

    def get(self, name):
        self.requested.append(name)
        return self.values.get(name)


class FakeDeno:
    """Stand-in for the ``Deno`` global."""

    def __init__(self, values=None):
        self.env = FakeDenoEnv(values)


@pytest.fixture
def logger():
    """Silent logger capturing entries in memory."""
    return SilentLogger(level="DEBUG")


@pytest.fixture
def node_scope():
    """Host scope of a server runtime with an empty environment."""
    return {"process": ProcessHandle({})}


@pytest.fixture
def deno_scope():
    """Host scope of a secure-scripting runtime with an empty environment."""
    return {"Deno": FakeDeno()}


@pytest.fixture
def worker_scope():
    """Host scope of a worker that also exposes ``process``."""
    return {"RUNTIME": "worker", "process": ProcessHandle({})}


@pytest.fixture
def make_deno():
    """Factory for fake ``Deno`` globals holding the given variables."""
    return FakeDeno
