# ABOUTME: Shared test fixtures for the weather panels test suite.
# ABOUTME: Provides a mock httpx.AsyncClient wired with the Paris example payloads.

from unittest.mock import AsyncMock

import pytest

from tests.fakes import routed_client


@pytest.fixture
def paris_client() -> AsyncMock:
    return routed_client()
