"""Pytest fixtures for Marketing Head Finder tests.

Provides helpers for building SerpAPI payloads and a SearchService whose
HTTP client is replaced with a mock.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from marketing_finder.services.search_service import SearchService
from marketing_finder.services.serp_client import SerpClient


def make_serp_payload(*results: dict) -> dict:
    """Build a SerpAPI response body with the given organic results."""
    return {"search_metadata": {"status": "Success"}, "organic_results": list(results)}


def make_response(payload=None, json_error: Exception | None = None) -> MagicMock:
    """Build a mock httpx response returning payload from .json()."""
    response = MagicMock()
    response.status_code = 200
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def mock_http_client(*responses: MagicMock) -> AsyncMock:
    """Mock AsyncClient whose .get returns responses in order."""
    client = AsyncMock()
    client.get = AsyncMock(side_effect=list(responses))
    return client


@pytest.fixture
def serp_client():
    """SerpClient with a test key.

    Returns:
        SerpClient: Client whose HTTP layer tests patch via _get_client.
    """
    return SerpClient(api_key="test-key")


@pytest.fixture
def search_service(serp_client):
    """SearchService wrapping the test SerpClient."""
    return SearchService(serp_client)


@pytest.fixture
def stub_service():
    """SearchService stand-in with AsyncMock search and verify methods."""
    service = MagicMock(spec=SearchService)
    service.search_candidates = AsyncMock(return_value=[])
    service.verify_candidate = AsyncMock()
    service.close = AsyncMock()
    return service
