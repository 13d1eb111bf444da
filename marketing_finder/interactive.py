"""Interactive console mode for the Marketing Head Finder.

Prompts for one company name, looks up its marketing leader and prints
either the confirmed results or the unverified candidate names.
"""

# Load environment variables before any other imports
from dotenv import load_dotenv

load_dotenv()

import asyncio
import sys

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from marketing_finder.models import Candidate
from marketing_finder.services import (
    CandidateOutcome,
    SearchService,
    create_search_service,
    lookup_company,
)

console = Console()


def _print_confirmed(company_name: str, confirmed: list[CandidateOutcome]) -> None:
    console.print(f"\n[bold green]Marketing leadership at {company_name}:[/bold green]")
    for i, (candidate, outcome) in enumerate(confirmed, start=1):
        console.print(f"{i}. {candidate.name} - {outcome.role}")


def _print_unverified(company_name: str, candidates: list[Candidate]) -> None:
    console.print(
        f"\n[yellow]Could not verify a current marketing head at {company_name}.[/yellow]"
    )
    console.print("Unverified candidates:")
    for i, candidate in enumerate(candidates, start=1):
        console.print(f"{i}. {candidate.name}")


async def find_marketing_head(
    company_name: str,
    service: SearchService | None = None,
) -> int:
    """Look up one company and print the outcome.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    owns_service = service is None
    if service is None:
        service = create_search_service()

    try:
        outcomes = await lookup_company(
            service,
            company_name,
            on_progress=lambda msg: console.print(f"[dim]{msg}[/dim]"),
        )
    except Exception as e:
        console.print(
            Panel(
                f"[red]Error:[/red] {str(e)}",
                title="[bold red]Error[/bold red]",
                border_style="red",
            )
        )
        return 1
    finally:
        if owns_service:
            await service.close()

    confirmed = [(c, o) for c, o in outcomes if o.is_confirmed]
    if confirmed:
        _print_confirmed(company_name, confirmed)
    elif outcomes:
        _print_unverified(company_name, [c for c, _ in outcomes])
    return 0


def main() -> int:
    """Console script entry point."""
    console.print("[bold]===== Marketing Head Finder =====[/bold]")
    company_name = Prompt.ask(
        "Enter company name", console=console, default="", show_default=False
    ).strip()
    if not company_name:
        console.print("[red]Company name is required.[/red]")
        return 1
    return asyncio.run(find_marketing_head(company_name))


if __name__ == "__main__":
    sys.exit(main())
