"""
Analysis response models.

Structured per-paper summary returned by the analyze endpoint.

Dependencies: pydantic
System role: API contract for paper analysis results
"""

from pydantic import BaseModel, Field

SUMMARY_FIELDS = ("aim", "methodology", "results", "scope", "relevance")


class PaperSummary(BaseModel):
    """Five-part summary of one research paper."""

    aim: str = Field(description="Main aim, goal, or purpose of the paper")
    methodology: str = Field(description="Key methods used")
    results: str = Field(description="Main results or findings")
    scope: str = Field(description="Scope, limitations, and boundaries")
    relevance: str = Field(description="Relevance to the requested research topic")


class AnalysisResult(PaperSummary):
    """Paper summary tagged with the file it was produced from."""

    file_name: str = Field(description="Name of the analyzed PDF")

    def to_summary(self) -> PaperSummary:
        """Drop the file name, keeping only the five summary fields."""
        return PaperSummary(**self.model_dump(include=set(SUMMARY_FIELDS)))
