"""NYC SAT Viewer MCP App Server.

FastMCP server with the school list, school detail, and MCP Apps interactive UI.
Run: nyc-sat-viewer
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from . import get_app_html
from .browser import LOADING_SCHOOLS_TEXT, NO_SCHOOLS_TEXT, SchoolBrowser

logger = logging.getLogger(__name__)

MCP_APP_MIME = "text/html;profile=mcp-app"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)
# Fetches live scores and moves the current selection
SELECTS_SCHOOL = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=True)
# Only clears local view state
CLOSES_SCHOOL = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False)

browser = SchoolBrowser()


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging and load the school directory once at startup."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    await browser.load_schools()
    yield


mcp = FastMCP(
    "NYC SAT Viewer",
    instructions="Browse NYC public high schools and their average SAT scores. Pick a school to see colour-coded reading, math, and writing averages and a map of its location.",
    lifespan=lifespan,
)


def _directory_state() -> dict:
    return {
        "status": browser.directory_status.value if browser.directory_status else None,
        "error": browser.directory_reason,
    }


# ─── MCP Apps UI Resource ─────────────────────────────────────────────────────

APP_RESOURCE_URI = "ui://nyc-sat-viewer/app"


@mcp.resource(
    APP_RESOURCE_URI,
    mime_type=MCP_APP_MIME,
)
def app_ui() -> str:
    """NYC SAT Viewer — school list, SAT score readout, and location map."""
    return get_app_html()


# ─── Tool 1: Open MCP App (Interactive UI) ──────────────────────────────────


@mcp.tool(annotations=READ_ONLY, meta={"ui": {"resourceUri": APP_RESOURCE_URI}})
async def open_sat_app() -> dict:
    """Open the NYC SAT Viewer app — searchable school list with score and map details."""
    schools = await browser.load_schools()
    return {
        "title": "NYC High Schools",
        "school_count": len(schools),
        "directory": _directory_state(),
        "summary": f"{len(schools)} high schools loaded" if schools else NO_SCHOOLS_TEXT,
    }


# ─── Tool 2: School List ─────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def sat_list_schools(query: str = "", limit: int = 50, refresh: bool = False) -> dict:
    """List NYC high schools, optionally filtered by name or dbn.

    Args:
        query: Case-insensitive substring of the school name or dbn. Empty lists every school.
        limit: Maximum number of schools returned. Default 50.
        refresh: Re-fetch the directory instead of reusing the one loaded at startup.
    """
    if browser.loading or refresh:
        await browser.load_schools(refresh=refresh)

    if not browser.schools:
        return {
            "title": "NYC High Schools",
            "schools": [],
            "count": 0,
            "directory": _directory_state(),
            "summary": NO_SCHOOLS_TEXT,
        }

    matches = browser.search(query)
    shown = browser.search(query, limit)
    if query:
        summary = f"{len(matches)} of {len(browser.schools)} schools match '{query}'"
    else:
        summary = f"{len(browser.schools)} NYC high schools"

    return {
        "title": "NYC High Schools",
        "schools": [{"dbn": s.dbn, "school_name": s.school_name} for s in shown],
        "count": len(matches),
        "directory": _directory_state(),
        "summary": summary,
    }


# ─── Tool 3: School Detail ───────────────────────────────────────────────────


@mcp.tool(annotations=SELECTS_SCHOOL)
async def sat_school_scores(dbn: str) -> dict:
    """Average SAT scores and location for one school. Scores are fetched fresh on every call.

    Args:
        dbn: The school's district-borough-number (e.g., '01M292').
    """
    if browser.loading:
        await browser.load_schools()

    school = browser.find(dbn)
    if school is None:
        summary = LOADING_SCHOOLS_TEXT if browser.loading else f"No high school with dbn '{dbn}'"
        return {"title": "School Not Found", "dbn": dbn, "detail": None, "summary": summary}

    applied = await browser.select(school)
    detail = browser.detail()
    if applied is None:
        logger.info("Selection changed while loading %s", school.dbn)

    scores = detail["scores"] if detail else {}
    if detail is None:
        summary = f"{school.school_name} was closed before its scores arrived"
    elif detail["dbn"] != school.dbn:
        summary = f"Selection moved to {detail['school_name']} before scores for {school.school_name} arrived"
    elif scores.get("available"):
        parts = [f"{box['category']}: {box['score']} ({box['tier']})" for box in scores["subjects"]]
        summary = f"{school.school_name} — " + " | ".join(parts) + f". {scores['caption']}."
    else:
        summary = f"{school.school_name} — {scores.get('message', '')}"

    return {
        "title": school.school_name,
        "dbn": school.dbn,
        "detail": detail,
        "summary": summary,
    }


# ─── Tool 4: Close Detail ────────────────────────────────────────────────────


@mcp.tool(annotations=CLOSES_SCHOOL)
async def sat_close_school() -> dict:
    """Close the school detail view and discard its scores."""
    previous = browser.selected
    browser.dismiss()
    return {
        "closed": previous.dbn if previous else None,
        "summary": f"Closed {previous.school_name}" if previous else "No school was open",
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
