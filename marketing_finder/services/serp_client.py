"""Async SerpAPI client.

Issues one GET request per search and returns the organic results. Transport and
parse failures are translated into the finder's error taxonomy and never
retried. API-reported errors (bad key, quota) are logged and yield no results.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from marketing_finder.config import DEFAULT_ENGINE, DEFAULT_TIMEOUT_SECONDS
from marketing_finder.exceptions import ConfigurationError, NetworkError, ParseError
from marketing_finder.models import OrganicResult

logger = logging.getLogger(__name__)

SERP_API_URL = "https://serpapi.com/search"


class SerpClient:
    """Thin async wrapper around the SerpAPI search endpoint.

    Attributes:
        api_key: SerpAPI key. Checked before every request.
        engine: Engine selector passed as the ``engine`` parameter.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str | None,
        engine: str = DEFAULT_ENGINE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key or ""
        self.engine = engine
        self.timeout = timeout
        self._http_client: httpx.AsyncClient | None = None

    @property
    def is_configured(self) -> bool:
        """Check if the API key is configured."""
        return bool(self.api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()
        self._http_client = None

    async def __aenter__(self) -> "SerpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def search(self, query: str, num: int) -> list[OrganicResult]:
        """Run one search and return its organic results.

        Args:
            query: Search query string.
            num: Maximum number of organic results to request.

        Returns:
            Organic results in the order returned, empty if there are none.

        Raises:
            ConfigurationError: The API key is missing. No request is made.
            NetworkError: The request failed at the transport level.
            ParseError: The body is not a JSON object.
        """
        if not self.is_configured:
            raise ConfigurationError(
                "SerpAPI key not found. Set SERP_API_KEY in the environment or .env file."
            )

        params = {
            "api_key": self.api_key,
            "engine": self.engine,
            "q": query,
            "num": num,
        }

        client = await self._get_client()
        logger.debug(f"SerpAPI query (num={num}): {query}")

        try:
            response = await client.get(SERP_API_URL, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(f"Error making API request: {e}") from e

        if response.status_code >= 400:
            logger.warning(f"SerpAPI returned HTTP {response.status_code} for query: {query}")

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise ParseError(f"Error parsing API response: {e}") from e

        if not isinstance(data, dict):
            raise ParseError("Error parsing API response: expected a JSON object")

        return self._parse_organic_results(data)

    def _parse_organic_results(self, data: dict[str, Any]) -> list[OrganicResult]:
        error = data.get("error")
        if error:
            logger.warning(f"SerpAPI error: {error}")

        raw_results = data.get("organic_results") or []
        if not isinstance(raw_results, list):
            raise ParseError("Error parsing API response: organic_results is not a list")

        results: list[OrganicResult] = []
        for raw in raw_results:
            if not isinstance(raw, dict):
                continue
            try:
                results.append(OrganicResult.model_validate(raw))
            except ValidationError as e:
                raise ParseError(f"Error parsing API response: {e}") from e
        return results
