"""NYC SAT Viewer MCP App — pure Python config, no custom JS/CSS."""

from mcpbundles_app_ui import App, Card, DarkTheme


class SatViewerApp(App):
    """Interactive school browser — tabbed engine and views from library."""

    name = "NYC SAT Viewer"
    subtitle = "NYC high schools and their average SAT scores"
    # success/warning/error double as the High/Medium/Low score tier colours
    theme = DarkTheme(
        accent="#3b82f6",
        bg_page="#0f172a",
        bg_card="#1e293b",
        bg_hover="#253048",
        text_primary="#f1f5f9",
        text_secondary="#e2e8f0",
        text_muted="#94a3b8",
        border="#334155",
        success="#10b981",
        warning="#f59e0b",
        error="#ef4444",
        chart_colors=["#ef4444", "#f59e0b", "#10b981"],
    )

    layout = [Card(title="NYC High Schools")]

    tool_name = "open_sat_app"
    tabs = [
        {"id": "overview", "label": "Schools", "tool": "open_sat_app", "type": "dashboard"},
        {
            "id": "search", "label": "Search", "tool": "sat_list_schools", "type": "search",
            "needsArgs": True,
            "searchPlaceholder": "Search by school name or dbn (e.g., Stuyvesant, 02M475)...",
        },
        {
            "id": "detail", "label": "Scores", "tool": "sat_school_scores", "type": "search",
            "needsArgs": True,
            "promptTitle": "SAT scores and location for one school",
            "promptHint": 'Ask your AI — e.g., "show SAT scores for Brooklyn Tech"',
        },
        {"id": "tools", "label": "Tools", "tool": None, "type": "tools"},
    ]
    footer_text = "NYC Open Data · DOE High School Directory · SAT Results"

    tool_catalog_intro = (
        "This server provides <strong>4 tools</strong> your AI can call directly. "
        "Scores are colour-coded: <strong>red</strong> at or below 450, "
        "<strong>yellow</strong> up to 650, <strong>green</strong> above 650. "
        "Listing tools are <strong>read-only</strong>; opening or closing a school only changes the current selection."
    )
    tool_catalog = [
        {"name": "open_sat_app", "label": "Open SAT Viewer", "icon": "\U0001f3eb", "desc": "Opens this interactive school browser.", "usage": "No arguments needed — just call it.", "source": "NYC Open Data"},
        {"name": "sat_list_schools", "label": "School List", "icon": "\U0001f4cb", "desc": "Lists NYC high schools, optionally filtered by name or dbn.", "usage": 'sat_list_schools(query="tech", limit=50)', "source": "DOE High School Directory"},
        {"name": "sat_school_scores", "label": "School Scores", "icon": "\U0001f4ca", "desc": "Average reading, math, and writing SAT scores with quality tiers, plus a map of the school.", "usage": 'sat_school_scores(dbn="02M475")', "source": "SAT Results"},
        {"name": "sat_close_school", "label": "Close School", "icon": "✖️", "desc": "Closes the school detail view.", "usage": "sat_close_school()", "source": "Local"},
    ]
