"""Shared fixtures — canned NYC Open Data payloads and a fake HTTP transport."""

import httpx
import pytest

SCHOOLS_PAYLOAD = [
    {
        "dbn": "02M260",
        "school_name": "Clinton School Writers & Artists, M.S. 260",
        "location": "10 East 15th Street, Manhattan NY 10003 (40.736526, -73.992727)",
        "latitude": "40.73653",
        "longitude": "-73.9927",
        "borough": "MANHATTAN",
    },
    {
        "dbn": "21K728",
        "school_name": "Liberation Diploma Plus High School",
        "location": "2865 West 19th Street, Brooklyn, NY 11224 (40.576976, -73.985413)",
        "latitude": "40.57698",
        "longitude": "-73.9854",
    },
    {
        "dbn": "08X282",
        "school_name": "Women's Academy of Excellence",
        "location": "456 White Plains Road, Bronx NY 10473",
    },
]

SCORE_PAYLOADS = {
    "02M260": [
        {
            "dbn": "02M260",
            "school_name": "CLINTON SCHOOL WRITERS & ARTISTS",
            "num_of_sat_test_takers": "29",
            "sat_critical_reading_avg_score": "355",
            "sat_math_avg_score": "404",
            "sat_writing_avg_score": "363",
        }
    ],
    "21K728": [
        {
            "dbn": "21K728",
            "num_of_sat_test_takers": "10",
            "sat_critical_reading_avg_score": "451",
            "sat_math_avg_score": "651",
            "sat_writing_avg_score": "650",
        }
    ],
    "08X282": [
        {
            "dbn": "08X282",
            "num_of_sat_test_takers": "s",
            "sat_critical_reading_avg_score": "s",
            "sat_math_avg_score": "s",
            "sat_writing_avg_score": "s",
        }
    ],
}


def make_transport(schools=SCHOOLS_PAYLOAD, scores=SCORE_PAYLOADS, status_code=200, calls=None):
    """Build an httpx.MockTransport serving both endpoints.

    Requests carrying a dbn query parameter get the matching score array
    (empty if unknown); everything else gets the school directory.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if status_code != 200:
            return httpx.Response(status_code, json={"error": True})
        dbn = request.url.params.get("dbn")
        if dbn is not None:
            return httpx.Response(200, json=scores.get(dbn, []))
        return httpx.Response(200, json=schools)

    return httpx.MockTransport(handler)


@pytest.fixture
def transport():
    return make_transport()


@pytest.fixture(autouse=True)
def _default_endpoints(monkeypatch):
    monkeypatch.delenv("NYC_SCHOOLS_URL", raising=False)
    monkeypatch.delenv("NYC_SAT_SCORES_URL", raising=False)
