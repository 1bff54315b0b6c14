"""Pydantic data models — the shared business objects.

The MCP server, the school browser, and the API client all exchange these
models. Nothing in here performs I/O.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .location import parse_coordinates, strip_coordinates
from .scoring import QualityTier, classify_score


class School(BaseModel):
    """A NYC high school as listed by the directory endpoint."""

    model_config = ConfigDict(frozen=True)

    dbn: str = Field(description="District-borough-number, unique per school")
    school_name: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location: str = Field(default="", description="Street address with the coordinates appended")

    @property
    def coordinates(self) -> Optional[tuple[float, float]]:
        return parse_coordinates(self.latitude, self.longitude)

    @property
    def address(self) -> str:
        return strip_coordinates(self.location)


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_count(value: Any) -> int:
    """Coerce an API field to int. Placeholders like "s" become 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.fullmatch(text):
            return 0
        return int(text)
    return 0


class SatScore(BaseModel):
    """Average SAT scores for one school.

    The API sends every field as a string and uses a non-numeric placeholder
    when a school had no test takers, so all four fields default to 0.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    num_test_takers: int = Field(0, alias="num_of_sat_test_takers")
    reading: int = Field(0, alias="sat_critical_reading_avg_score")
    math: int = Field(0, alias="sat_math_avg_score")
    writing: int = Field(0, alias="sat_writing_avg_score")

    @field_validator("num_test_takers", "reading", "math", "writing", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int:
        return _parse_count(value)

    @computed_field
    @property
    def reading_tier(self) -> QualityTier:
        return classify_score(self.reading)

    @computed_field
    @property
    def math_tier(self) -> QualityTier:
        return classify_score(self.math)

    @computed_field
    @property
    def writing_tier(self) -> QualityTier:
        return classify_score(self.writing)

    @property
    def has_data(self) -> bool:
        """False when nobody sat the test; the zero scores are meaningless then."""
        return self.num_test_takers > 0


class FetchStatus(str, Enum):
    """Outcome of a single fetch against the open data API."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


class SchoolListResult(BaseModel):
    """Directory fetch outcome."""

    status: FetchStatus
    schools: list[School] = Field(default_factory=list)
    reason: Optional[str] = Field(None, description="Why the fetch failed, if it did")


class ScoreResult(BaseModel):
    """SAT score fetch outcome for one school."""

    dbn: str
    status: FetchStatus
    score: Optional[SatScore] = None
    reason: Optional[str] = Field(None, description="Why the fetch failed, if it did")
