"""Marketing head search and verification using SerpAPI.

Two sequential lookups per company:
1. Candidate search - one broad query, names extracted from result titles/snippets
2. Candidate verification - one targeted query per candidate, confirmed when a
   single result mentions both a marketing title and the company
"""

import logging

from marketing_finder.config import get_settings
from marketing_finder.models import Candidate, VerificationOutcome
from marketing_finder.services.extraction import (
    classify_role,
    confirms_role,
    extract_candidate_names,
)
from marketing_finder.services.serp_client import SerpClient

logger = logging.getLogger(__name__)

CANDIDATE_RESULT_LIMIT = 5
VERIFICATION_RESULT_LIMIT = 3


def build_candidate_query(company_name: str) -> str:
    return f"The Current Indian CMO OR marketing head of {company_name}"


def build_verification_query(name: str, company_name: str) -> str:
    return (
        f'{name} current CMO OR "marketing head" OR "chief marketing officer" '
        f'OR "marketing director" {company_name}'
    )


class SearchService:
    """Finds and verifies marketing leaders for a company.

    Every call is awaited to completion before the next one is issued.

    Attributes:
        client: SerpClient holding the API key and HTTP connection.
    """

    def __init__(self, client: SerpClient) -> None:
        self.client = client

    @property
    def is_configured(self) -> bool:
        return self.client.is_configured

    async def close(self) -> None:
        await self.client.close()

    async def search_candidates(self, company_name: str) -> list[Candidate]:
        """Search for potential marketing heads of a company.

        Args:
            company_name: Company to search for.

        Returns:
            Unique candidates in result order, empty if none were extracted.

        Raises:
            ConfigurationError, NetworkError, ParseError: from the SerpAPI call.
        """
        results = await self.client.search(
            build_candidate_query(company_name),
            num=CANDIDATE_RESULT_LIMIT,
        )
        names = extract_candidate_names(results)
        logger.debug(
            f"Extracted {len(names)} candidate names from {len(results)} results for {company_name}"
        )
        return [Candidate(name=name) for name in names]

    async def verify_candidate(self, name: str, company_name: str) -> VerificationOutcome:
        """Check whether a candidate currently holds a marketing role at a company.

        The first result whose combined snippet and title mention both a
        marketing-title keyword and the company name confirms the candidate.
        The role is read from that same result.

        Args:
            name: Candidate name.
            company_name: Company to verify against.

        Returns:
            VerificationOutcome, with an empty role when not confirmed.
        """
        results = await self.client.search(
            build_verification_query(name, company_name),
            num=VERIFICATION_RESULT_LIMIT,
        )

        for result in results:
            text = result.combined_text
            if confirms_role(text, company_name):
                role = classify_role(text)
                logger.debug(f"Confirmed {name} at {company_name} as {role}")
                return VerificationOutcome(is_confirmed=True, role=role)

        return VerificationOutcome(is_confirmed=False, role="")


def create_search_service() -> SearchService:
    """Build a SearchService from the environment settings."""
    settings = get_settings()
    client = SerpClient(
        api_key=settings.serp_api_key,
        engine=settings.serp_engine,
        timeout=settings.http_timeout_seconds,
    )
    return SearchService(client)
