"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from logsync.core.exceptions import StorageError, StorageNotFoundError
from logsync.core.models import ObjectMetadata, RemoteObject


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and pipelines")
    config.addinivalue_line("markers", "storage: Storage adapters (s3, filesystem)")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class FakeStorage:
    """In-memory StoragePort for pipeline tests.

    Objects are added with put(); keys listed in failing_downloads or
    failing_heads raise StorageError when accessed.
    """

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, datetime]] = {}
        self.failing_downloads: set[str] = set()
        self.failing_heads: set[str] = set()
        self.downloads: list[str] = []
        self.list_calls = 0

    def put(self, key: str, content: bytes | str, created_at: datetime) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.objects[key] = (content, created_at)

    def list_objects(self) -> list[RemoteObject]:
        self.list_calls += 1
        return [
            RemoteObject(key=key, size=len(content), created_at=created_at)
            for key, (content, created_at) in self.objects.items()
        ]

    def download_content(self, key: str) -> bytes:
        self.downloads.append(key)
        if key in self.failing_downloads:
            raise StorageError(f"Simulated download failure: {key}", source=key)
        if key not in self.objects:
            raise StorageNotFoundError(f"Object not found: {key}", source=key)
        return self.objects[key][0]

    def head(self, key: str) -> ObjectMetadata:
        if key in self.failing_heads:
            raise StorageError(f"Simulated head failure: {key}", source=key)
        if key not in self.objects:
            raise StorageNotFoundError(f"Object not found: {key}", source=key)
        content, created_at = self.objects[key]
        return ObjectMetadata(size=len(content), created_at=created_at)


@pytest.fixture
def fake_storage() -> FakeStorage:
    """Reusable in-memory storage adapter for testing.

    Implements StoragePort without any I/O so pipeline tests control
    object keys, contents and creation timestamps directly.
    """
    return FakeStorage()
