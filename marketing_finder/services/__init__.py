"""Services package for the Marketing Head Finder."""

from marketing_finder.services.company_processor import (
    CandidateOutcome,
    build_records,
    lookup_company,
    process_companies,
    process_company,
)
from marketing_finder.services.search_service import SearchService, create_search_service
from marketing_finder.services.serp_client import SerpClient

__all__ = [
    "SerpClient",
    "SearchService",
    "create_search_service",
    "CandidateOutcome",
    "build_records",
    "lookup_company",
    "process_company",
    "process_companies",
]
