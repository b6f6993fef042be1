"""Shared pytest fixtures for path service tests."""

from __future__ import annotations

import pytest

from pathkit.features.path import PathService
from pathkit.features.path.adapters import InMemoryFilesystemProvider


@pytest.fixture
def memory_provider() -> InMemoryFilesystemProvider:
    """Provide an in-memory tree rooted at ``/home/user`` with a few entries."""

    provider = InMemoryFilesystemProvider(current_directory="/home/user")
    provider.make_directory("/home/user/docs")
    provider.make_directory("/home/user/empty")
    provider.make_directory("/srv/data/nested")
    assert provider.write_bytes("/srv/data/a.txt", b"alpha")
    assert provider.write_bytes("/srv/data/b.bin", b"\xff\xfe")
    return provider


@pytest.fixture
def memory_service(memory_provider: InMemoryFilesystemProvider) -> PathService:
    """Provide a path service bound to the in-memory provider."""

    return PathService(memory_provider, encoding="utf-8")
