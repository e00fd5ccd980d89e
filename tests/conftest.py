"""Shared test fixtures for extratext."""

from __future__ import annotations

from pathlib import Path

import pytest

from extratext.client import DocsTextClient
from extratext.mock import MockDocsTransport
from tests.helpers import GOLDEN_DIR


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR


@pytest.fixture
def mock_transport() -> MockDocsTransport:
    transport = MockDocsTransport()
    transport.add_document("doc1", title="Quarterly Report", text="Hello World")
    return transport


@pytest.fixture
def client(mock_transport: MockDocsTransport) -> DocsTextClient:
    return DocsTextClient(mock_transport)
