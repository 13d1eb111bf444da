"""Heuristic name and role extraction from search result text.

Candidate names are taken from result titles split at common separators,
falling back to a "First Last is/," pattern in the snippet. Roles are read
from marketing-title keywords in the combined title and snippet.
"""

import re

from marketing_finder.models import OrganicResult

# Title separators, tried in order
TITLE_SEPARATORS = (" - ", " | ", ",")

# Two capitalised words followed by " is" or a comma, e.g. "John Smith is the CMO"
SNIPPET_NAME_PATTERN = re.compile(r"([A-Z][a-z]+ [A-Z][a-z]+)(?:\s+is|\s*,)")

MARKETING_KEYWORDS = (
    "cmo",
    "chief marketing officer",
    "marketing head",
    "head of marketing",
    "marketing director",
    "vp of marketing",
    "vice president of marketing",
)

ROLE_CMO = "Chief Marketing Officer (CMO)"
ROLE_MARKETING_DIRECTOR = "Marketing Director"
ROLE_VP_MARKETING = "VP of Marketing"
ROLE_MARKETING_HEAD = "Marketing Head"

# Checked in priority order; anything else that matched is a Marketing Head
ROLE_PRIORITY: list[tuple[tuple[str, ...], str]] = [
    (("cmo", "chief marketing officer"), ROLE_CMO),
    (("marketing director",), ROLE_MARKETING_DIRECTOR),
    (("vp of marketing", "vice president of marketing"), ROLE_VP_MARKETING),
]


def extract_name_from_title(title: str) -> str:
    """Return the text before the first matching separator, or ""."""
    for separator in TITLE_SEPARATORS:
        if separator in title:
            return title.split(separator, 1)[0]
    return ""


def extract_name_from_snippet(snippet: str) -> str:
    match = SNIPPET_NAME_PATTERN.search(snippet)
    return match.group(1) if match else ""


def extract_name(result: OrganicResult) -> str:
    """Extract a candidate person name from one organic result.

    The title is tried first. The snippet is only consulted when the title
    yields nothing.

    Returns:
        The extracted name, or "" when no rule applies.
    """
    name = extract_name_from_title(result.title)
    if not name and result.snippet:
        name = extract_name_from_snippet(result.snippet)
    return name


def extract_candidate_names(results: list[OrganicResult]) -> list[str]:
    """Extract unique candidate names, preserving result order."""
    names: list[str] = []
    for result in results:
        name = extract_name(result)
        if name and name not in names:
            names.append(name)
    return names


def has_marketing_keyword(text: str) -> bool:
    return any(keyword in text for keyword in MARKETING_KEYWORDS)


def confirms_role(text: str, company_name: str) -> bool:
    """Check if lower-cased text mentions a marketing title and the company."""
    return has_marketing_keyword(text) and company_name.lower() in text


def classify_role(text: str) -> str:
    """Map lower-cased text containing a marketing keyword to a role label."""
    for keywords, role in ROLE_PRIORITY:
        if any(keyword in text for keyword in keywords):
            return role
    return ROLE_MARKETING_HEAD
