"""School browser — the state behind the list and detail views.

Loads the directory once, fetches SAT scores on every selection, and keeps
track of which school is currently shown. Score responses are keyed by dbn:
a response that arrives after the user moved on to another school is dropped
instead of overwriting the newer selection.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .core.clients import nyc_open_data
from .core.location import map_region
from .core.models import FetchStatus, SatScore, School, ScoreResult

logger = logging.getLogger(__name__)

NO_SCHOOLS_TEXT = "No High Schools Found..."
LOADING_SCHOOLS_TEXT = "Loading High Schools..."
LOADING_SCORE_TEXT = "Loading SAT Score Data..."
SCORE_UNAVAILABLE_TEXT = "SAT Score Data Is Unavailable..."
LOCATION_UNAVAILABLE_TEXT = "Location Data Is Unavailable..."


def score_readout(score: SatScore) -> dict:
    """Render a score as the three colour-coded boxes plus caption."""
    if not score.has_data:
        return {"available": False, "message": SCORE_UNAVAILABLE_TEXT}

    boxes = []
    for title, value, tier in (
        ("Reading", score.reading, score.reading_tier),
        ("Math", score.math, score.math_tier),
        ("Writing", score.writing, score.writing_tier),
    ):
        boxes.append({"category": title, "score": value, "tier": tier.value, "color": tier.color})

    return {
        "available": True,
        "subjects": boxes,
        "num_test_takers": score.num_test_takers,
        "caption": f"Average Scores For {score.num_test_takers} Test Takers",
    }


def location_view(school: School) -> dict:
    """Render the map block, or the unavailable indicator."""
    coordinates = school.coordinates
    if coordinates is None:
        return {"available": False, "message": LOCATION_UNAVAILABLE_TEXT}
    latitude, longitude = coordinates
    return {
        "available": True,
        "annotation": school.address,
        "marker": {"latitude": latitude, "longitude": longitude},
        "region": map_region(latitude, longitude),
    }


class SchoolBrowser:
    """Holds the school list, the selected school and its score."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport
        self.schools: Optional[list[School]] = None
        self.directory_status: Optional[FetchStatus] = None
        self.directory_reason: Optional[str] = None
        self.selected: Optional[School] = None
        self.score_result: Optional[ScoreResult] = None

    @property
    def loading(self) -> bool:
        return self.schools is None

    async def load_schools(self, refresh: bool = False) -> list[School]:
        """Load the directory. Only the first call hits the network unless refresh is set."""
        if self.schools is not None and not refresh:
            return self.schools

        result = await nyc_open_data.load_schools(transport=self._transport)
        self.schools = result.schools
        self.directory_status = result.status
        self.directory_reason = result.reason
        return self.schools

    def find(self, dbn: str) -> Optional[School]:
        key = dbn.strip().upper()
        for school in self.schools or []:
            if school.dbn.upper() == key:
                return school
        return None

    def search(self, query: str = "", limit: Optional[int] = None) -> list[School]:
        """Filter schools by a case-insensitive name or dbn substring."""
        needle = query.strip().lower()
        matches = [
            s for s in self.schools or []
            if not needle or needle in s.school_name.lower() or needle in s.dbn.lower()
        ]
        if limit is not None and limit >= 0:
            return matches[:limit]
        return matches

    async def select(self, school: School) -> Optional[ScoreResult]:
        """Show a school and fetch its scores.

        Returns the result if it was applied, or None when another school was
        selected (or the view dismissed) before the response came back.
        """
        self.selected = school
        self.score_result = None

        result = await nyc_open_data.load_sat_score(school.dbn, transport=self._transport)

        if self.selected is None or self.selected.dbn != result.dbn:
            logger.info("Discarding stale SAT score response for %s", result.dbn)
            return None
        self.score_result = result
        return result

    def dismiss(self) -> None:
        self.selected = None
        self.score_result = None

    def detail(self) -> Optional[dict]:
        """The detail view for the selected school, or None if nothing is selected."""
        school = self.selected
        if school is None:
            return None

        result = self.score_result
        if result is None:
            scores = {"available": False, "loading": True, "message": LOADING_SCORE_TEXT}
        elif result.score is None:
            # No record for this school, or the fetch failed. The view can't tell.
            scores = {"available": False, "message": SCORE_UNAVAILABLE_TEXT}
        else:
            scores = score_readout(result.score)

        return {
            "dbn": school.dbn,
            "school_name": school.school_name,
            "scores": scores,
            "location": location_view(school),
            "score_status": result.status.value if result else None,
            "score_error": result.reason if result else None,
        }
