"""Batch entry point for the Marketing Head Finder.

Reads company names from a CSV file, looks up each company's marketing
leader and writes one row per candidate to an output CSV.

Usage:
    marketing-head-finder [input.csv] [output.csv]
"""

# Load environment variables before any other imports
from dotenv import load_dotenv

load_dotenv()

import argparse
import asyncio
import logging
import sys

from marketing_finder.config import get_settings
from marketing_finder.io_utils import read_companies, write_results
from marketing_finder.services import SearchService, create_search_service, process_companies

logger = logging.getLogger(__name__)

DEFAULT_INPUT_FILE = "companies.csv"
DEFAULT_OUTPUT_FILE = "results.csv"
BANNER = "===== Marketing Head Finder ====="


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marketing-head-finder",
        description="Find the marketing head of each company listed in a CSV file.",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default=DEFAULT_INPUT_FILE,
        help=f"CSV file with a 'company' column (default: {DEFAULT_INPUT_FILE})",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        default=DEFAULT_OUTPUT_FILE,
        help=f"CSV file to write results to (default: {DEFAULT_OUTPUT_FILE})",
    )
    return parser


async def process_csv(
    input_file: str,
    output_file: str,
    service: SearchService | None = None,
) -> int:
    """Run the batch lookup from input_file to output_file.

    Args:
        input_file: Path to the input CSV.
        output_file: Path to the output CSV.
        service: SearchService to use. Built from settings when omitted.

    Returns:
        Number of result records written.
    """
    logger.info(BANNER)
    logger.info(f"Reading companies from {input_file}...")
    companies = read_companies(input_file)
    logger.info(f"Found {len(companies)} companies to process.")

    owns_service = service is None
    if service is None:
        service = create_search_service()

    try:
        records = await process_companies(service, companies)
    finally:
        if owns_service:
            await service.close()

    write_results(output_file, records)
    logger.info(f"Results written to {output_file}")
    return len(records)


def run(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(message)s",
    )

    try:
        asyncio.run(process_csv(args.input_file, args.output_file))
    except Exception as e:
        logger.error(f"Batch run failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
