"""NYC Open Data (Socrata) API client — high school directory and SAT results.

API docs: https://dev.socrata.com/foundry/data.cityofnewyork.us/s3k6-pzi2
No authentication required.

Every failure is caught here. The ``load_*`` functions report it as a
``FAILED`` result with a reason; the ``fetch_*`` wrappers collapse it to an
empty list or ``None``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..models import FetchStatus, SatScore, School, SchoolListResult, ScoreResult

logger = logging.getLogger(__name__)

DEFAULT_SCHOOLS_URL = "https://data.cityofnewyork.us/resource/s3k6-pzi2.json"
DEFAULT_SAT_SCORES_URL = "https://data.cityofnewyork.us/resource/f9bf-2cp4.json"

TIMEOUT = httpx.Timeout(30.0, connect=10.0)


def get_schools_url() -> str:
    return os.environ.get("NYC_SCHOOLS_URL", DEFAULT_SCHOOLS_URL)


def get_sat_scores_url() -> str:
    return os.environ.get("NYC_SAT_SCORES_URL", DEFAULT_SAT_SCORES_URL)


async def _get_json_array(
    url: str,
    params: Optional[dict] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list:
    """GET a URL and return its body as a JSON array.

    Raises httpx.HTTPError on transport failure or a non-200 status and
    ValueError when the body is not a JSON array.
    """
    async with httpx.AsyncClient(timeout=TIMEOUT, transport=transport) as client:
        response = await client.get(url, params=params)
        if response.status_code != 200:
            raise httpx.HTTPStatusError(
                f"Unexpected status {response.status_code} from {url}",
                request=response.request,
                response=response,
            )
        data = response.json()

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
    return data


def _parse_school(record: Any) -> Optional[School]:
    """Parse a directory record into a School, or None if it is unusable."""
    if not isinstance(record, dict):
        return None
    try:
        return School.model_validate(record)
    except ValidationError:
        return None


async def load_schools(transport: Optional[httpx.AsyncBaseTransport] = None) -> SchoolListResult:
    """Fetch the full high school directory with an explicit outcome."""
    url = get_schools_url()
    try:
        records = await _get_json_array(url, transport=transport)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("School directory fetch failed: %s", exc)
        return SchoolListResult(status=FetchStatus.FAILED, reason=str(exc))

    schools = []
    for record in records:
        school = _parse_school(record)
        if school is None:
            logger.warning("Skipping malformed directory record: %r", record)
            continue
        schools.append(school)

    if records and not schools:
        reason = f"all {len(records)} directory records were malformed"
        logger.warning("School directory fetch failed: %s", reason)
        return SchoolListResult(status=FetchStatus.FAILED, reason=reason)
    if not schools:
        return SchoolListResult(status=FetchStatus.EMPTY)
    logger.info("Loaded %d schools from %s", len(schools), url)
    return SchoolListResult(status=FetchStatus.OK, schools=schools)


async def fetch_schools(transport: Optional[httpx.AsyncBaseTransport] = None) -> list[School]:
    """Fetch the high school directory. Any failure yields an empty list."""
    result = await load_schools(transport=transport)
    return result.schools


async def load_sat_score(
    dbn: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ScoreResult:
    """Fetch SAT averages for one school with an explicit outcome.

    The API always answers with an array, even for a single school; only the
    first element is used.
    """
    try:
        records = await _get_json_array(get_sat_scores_url(), params={"dbn": dbn}, transport=transport)
        if not records:
            return ScoreResult(dbn=dbn, status=FetchStatus.EMPTY)
        first = records[0]
        if not isinstance(first, dict):
            raise ValueError(f"Expected a JSON object, got {type(first).__name__}")
        score = SatScore.model_validate(first)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("SAT score fetch failed for %s: %s", dbn, exc)
        return ScoreResult(dbn=dbn, status=FetchStatus.FAILED, reason=str(exc))

    return ScoreResult(dbn=dbn, status=FetchStatus.OK, score=score)


async def fetch_sat_score(
    dbn: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[SatScore]:
    """Fetch SAT averages for one school. Empty results and failures yield None."""
    result = await load_sat_score(dbn, transport=transport)
    return result.score
