"""Per-company orchestration of candidate search and verification."""

import logging
from typing import Callable

from marketing_finder.models import Candidate, ResultRecord, VerificationOutcome
from marketing_finder.services.search_service import SearchService

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]
CandidateOutcome = tuple[Candidate, VerificationOutcome]


def _report(message: str, on_progress: ProgressCallback | None) -> None:
    logger.info(message)
    if on_progress is not None:
        on_progress(message)


async def lookup_company(
    service: SearchService,
    company_name: str,
    on_progress: ProgressCallback | None = None,
) -> list[CandidateOutcome]:
    """Search for candidates and verify each of them in turn.

    Errors are not caught here.

    Args:
        service: SearchService to query.
        company_name: Company to look up.
        on_progress: Optional callback receiving each progress line.

    Returns:
        (candidate, verification outcome) pairs in candidate order, empty
        when no candidate was found.
    """
    _report(f"Searching for marketing head of {company_name}...", on_progress)
    candidates = await service.search_candidates(company_name)
    if not candidates:
        _report(f"No marketing head profiles found for {company_name}.", on_progress)
        return []

    _report(f"Found {len(candidates)} potential candidates. Verifying...", on_progress)
    outcomes: list[CandidateOutcome] = []
    for candidate in candidates:
        _report(f"Verifying {candidate.name}...", on_progress)
        outcome = await service.verify_candidate(candidate.name, company_name)
        outcomes.append((candidate, outcome))
    return outcomes


def build_records(company_name: str, outcomes: list[CandidateOutcome]) -> list[ResultRecord]:
    """Turn verification outcomes into output records for one company."""
    if not outcomes:
        return [ResultRecord.not_found(company_name)]

    records: list[ResultRecord] = []
    for candidate, outcome in outcomes:
        if outcome.is_confirmed:
            records.append(ResultRecord.confirmed(company_name, candidate.name, outcome.role))
        else:
            records.append(ResultRecord.unverified(company_name, candidate.name))
    return records


async def process_company(service: SearchService, company_name: str) -> list[ResultRecord]:
    """Produce the output records for one company.

    One record per candidate, a "Not Found" placeholder when there are no
    candidates, or an "Error" placeholder when anything raises.
    """
    logger.info(f"Processing: {company_name}")

    try:
        outcomes = await lookup_company(service, company_name)
    except Exception as e:
        logger.error(f"Error processing {company_name}: {e}")
        return [ResultRecord.error(company_name, str(e) or type(e).__name__)]

    return build_records(company_name, outcomes)


async def process_companies(
    service: SearchService,
    company_names: list[str],
) -> list[ResultRecord]:
    """Process companies one after another and concatenate their records."""
    all_records: list[ResultRecord] = []
    for company_name in company_names:
        all_records.extend(await process_company(service, company_name))
    return all_records
