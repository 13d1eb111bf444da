"""Pydantic models for the Marketing Head Finder.

Models mirror the CSV output layout (Company, Marketing Head, Role, Verified)
and the subset of the SerpAPI organic-result schema the finder consumes.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

VerifiedStatus = Literal["Yes", "No", "N/A"]

NOT_FOUND_NAME = "Not Found"
ERROR_NAME = "Error"
NOT_APPLICABLE = "N/A"
UNKNOWN_ROLE = "Unknown"

# Output CSV column order
RESULT_COLUMNS = ["Company", "Marketing Head", "Role", "Verified"]


class OrganicResult(BaseModel):
    """A single non-advertisement search result returned by SerpAPI.

    Only ``title`` and ``snippet`` are used for extraction. Any other keys in
    the payload are ignored, and missing or null text fields become "".
    """

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    snippet: str = ""

    @field_validator("title", "snippet", mode="before")
    @classmethod
    def none_to_empty(cls, v: object) -> object:
        """Treat null text fields as empty strings."""
        return "" if v is None else v

    @property
    def combined_text(self) -> str:
        """Lower-cased snippet and title, joined by a space."""
        return f"{self.snippet} {self.title}".lower()


class Candidate(BaseModel):
    """Person name extracted from search results, not yet verified."""

    name: str = Field(..., min_length=1, description="Extracted person name")


class VerificationOutcome(BaseModel):
    """Outcome of verifying one candidate against one company.

    Attributes:
        is_confirmed: Whether a result jointly mentioned a marketing title
            and the company.
        role: Detected role label, empty when not confirmed.
    """

    is_confirmed: bool = False
    role: str = ""

    @model_validator(mode="after")
    def role_requires_confirmation(self) -> "VerificationOutcome":
        if not self.is_confirmed and self.role:
            raise ValueError("role must be empty for unconfirmed outcomes")
        return self


class ResultRecord(BaseModel):
    """One output row: a candidate (or placeholder) for a company.

    Serialises by alias to the CSV column names.
    """

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    company: str = Field(..., alias="Company")
    name: str = Field(..., alias="Marketing Head")
    role: str = Field(..., alias="Role")
    verified: VerifiedStatus = Field(..., alias="Verified")

    @classmethod
    def confirmed(cls, company: str, name: str, role: str) -> "ResultRecord":
        return cls(company=company, name=name, role=role, verified="Yes")

    @classmethod
    def unverified(cls, company: str, name: str) -> "ResultRecord":
        return cls(company=company, name=name, role=UNKNOWN_ROLE, verified="No")

    @classmethod
    def not_found(cls, company: str) -> "ResultRecord":
        """Placeholder for a company where no candidate could be extracted."""
        return cls(
            company=company,
            name=NOT_FOUND_NAME,
            role=NOT_APPLICABLE,
            verified=NOT_APPLICABLE,
        )

    @classmethod
    def error(cls, company: str, message: str) -> "ResultRecord":
        """Placeholder for a company whose processing raised an error."""
        return cls(
            company=company,
            name=ERROR_NAME,
            role=message,
            verified=NOT_APPLICABLE,
        )

    def to_row(self) -> dict[str, str]:
        """Return the record keyed by output column name."""
        return self.model_dump(by_alias=True)
