"""NYC SAT Viewer MCP App Server.

Browse NYC public high schools and their average SAT scores, colour-coded by
how well each school did, with a map of every school's location.
Data from the NYC Open Data high school directory and SAT results datasets.
"""

__version__ = "0.1.0"


def get_app_html() -> str:
    """Return the MCP App HTML content. Re-renders each call for hot reload."""
    from .app_definition import SatViewerApp

    return SatViewerApp().render()
