"""MCP server for Yhteys startup search."""
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

# Add project root to Python path for absolute imports
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from yhteys.config import get_config
from yhteys.facets import get_filter_options, get_search_suggestions
from yhteys.models import FilterOptions, StartupRecord
from yhteys.sample_data import get_sample_startups
from yhteys.search import FuzzySearchEngine, SearchEngine
from yhteys.startups_reader import merge_catalogs, read_startups


# Global state
_startups_cache: Optional[List[StartupRecord]] = None
_search_engine: Optional[SearchEngine] = None


def get_search_engine() -> SearchEngine:
    """Get the search engine, creating it from config on first use."""
    global _search_engine

    if _search_engine is None:
        _search_engine = FuzzySearchEngine(get_config().scoring)

    return _search_engine


def load_startups(startups_path: Optional[Path] = None) -> List[StartupRecord]:
    """Load the startup catalog, using cache if available.

    Stored startups are merged with the sample catalog unless samples are
    disabled in config.

    Args:
        startups_path: Optional path to the startups file

    Returns:
        List of startups
    """
    global _startups_cache

    if _startups_cache is None:
        config = get_config()
        stored: List[StartupRecord] = []
        try:
            stored = read_startups(startups_path or config.startups_path)
        except FileNotFoundError as e:
            print(f"Warning: Could not find startups file: {e}", file=sys.stderr)
        except (json.JSONDecodeError, ValueError) as e:
            print(f"Error loading startups: {e}", file=sys.stderr)

        samples = get_sample_startups() if config.include_samples else []
        _startups_cache = merge_catalogs(stored, samples)

    return _startups_cache


def reload_startups(startups_path: Optional[Path] = None) -> List[StartupRecord]:
    """Drop the cached catalog and read it again."""
    global _startups_cache

    _startups_cache = None
    return load_startups(startups_path)


def _json_content(payload: Any) -> List[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


def _threshold(value: Any) -> float:
    if value is None:
        return get_config().interactive_threshold
    return float(value)


def _limit(value: Any) -> int:
    if value is None:
        return get_config().result_limit
    return max(int(value), 0)


async def health_check_tool() -> List[TextContent]:
    """Tool handler for health_check."""
    config = get_config()
    startups = load_startups()
    return _json_content({
        "status": "ok",
        "startups": len(startups),
        "threshold": config.interactive_threshold,
        "include_samples": config.include_samples,
    })


async def search_startups_tool(
    query: str,
    threshold: Optional[float] = None,
    limit: Optional[int] = None,
) -> List[TextContent]:
    """Tool handler for search_startups.

    Args:
        query: Search query string
        threshold: Minimum score (defaults to the interactive threshold)
        limit: Maximum number of results

    Returns:
        List of TextContent with search results
    """
    startups = load_startups()

    if not startups:
        return [TextContent(
            type="text",
            text="No startups available. Please provide a startups file or enable the sample catalog."
        )]

    results = get_search_engine().search(query, startups, _threshold(threshold))

    if not results:
        return [TextContent(
            type="text",
            text=f"No startups found matching query: {query}"
        )]

    return _json_content([r.to_dict() for r in results[:_limit(limit)]])


async def advanced_search_tool(
    query: str,
    filters: Optional[dict] = None,
    threshold: Optional[float] = None,
    limit: Optional[int] = None,
) -> List[TextContent]:
    """Tool handler for advanced_search.

    Args:
        query: Search query string
        filters: Filter mapping (industry, location, fundingStage, minTeamSize,
            maxTeamSize, minRating, tags)
        threshold: Minimum score (defaults to the interactive threshold)
        limit: Maximum number of results

    Returns:
        List of TextContent with search results
    """
    startups = load_startups()
    filter_options = FilterOptions.from_dict(filters)

    results = get_search_engine().advanced_search(query, startups, filter_options, _threshold(threshold))

    if not results:
        return [TextContent(
            type="text",
            text=f"No startups found matching query and filters: {query}"
        )]

    return _json_content([r.to_dict() for r in results[:_limit(limit)]])


async def get_filter_options_tool() -> List[TextContent]:
    """Tool handler for get_filter_options."""
    return _json_content(get_filter_options(load_startups()).to_dict())


async def get_search_suggestions_tool(limit: Optional[int] = None) -> List[TextContent]:
    """Tool handler for get_search_suggestions."""
    suggestions = get_search_suggestions(load_startups(), get_config().scoring)
    if limit is not None:
        suggestions = suggestions[:_limit(limit)]
    return _json_content(suggestions)


async def reload_startups_tool() -> List[TextContent]:
    """Tool handler for reload_startups."""
    startups = reload_startups()
    return _json_content({"status": "reloaded", "startups": len(startups)})


_QUERY_SCHEMA = {
    "type": "string",
    "description": "Free-text search query, e.g. 'AI automation platform for enterprises'"
}
_THRESHOLD_SCHEMA = {
    "type": "number",
    "description": "Minimum relevance score (0-100)"
}
_LIMIT_SCHEMA = {
    "type": "integer",
    "description": "Maximum number of results to return"
}


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured Server instance
    """
    server = Server("yhteys-search-mcp")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name="health_check",
                description="Report server status and the size of the startup catalog.",
                inputSchema={"type": "object", "properties": {}}
            ),
            Tool(
                name="search_startups",
                description="Search startups by free text. Returns ranked startups with score and matched fields.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": _QUERY_SCHEMA,
                        "threshold": _THRESHOLD_SCHEMA,
                        "limit": _LIMIT_SCHEMA,
                    },
                    "required": ["query"]
                }
            ),
            Tool(
                name="advanced_search",
                description="Search startups by free text within those matching structured filters.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": _QUERY_SCHEMA,
                        "filters": {
                            "type": "object",
                            "description": "Filters to apply before scoring",
                            "properties": {
                                "industry": {"type": "string"},
                                "location": {"type": "string"},
                                "fundingStage": {"type": "string"},
                                "minTeamSize": {"type": "integer"},
                                "maxTeamSize": {"type": "integer"},
                                "minRating": {"type": "number"},
                                "tags": {"type": "array", "items": {"type": "string"}},
                            }
                        },
                        "threshold": _THRESHOLD_SCHEMA,
                        "limit": _LIMIT_SCHEMA,
                    },
                    "required": ["query"]
                }
            ),
            Tool(
                name="get_filter_options",
                description="List the industries, locations, funding stages and tags present in the catalog.",
                inputSchema={"type": "object", "properties": {}}
            ),
            Tool(
                name="get_search_suggestions",
                description="Suggest popular searches based on the catalog.",
                inputSchema={
                    "type": "object",
                    "properties": {"limit": _LIMIT_SCHEMA}
                }
            ),
            Tool(
                name="reload_startups",
                description="Re-read the startups file and rebuild the catalog.",
                inputSchema={"type": "object", "properties": {}}
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls."""
        arguments = arguments or {}

        if name == "health_check":
            return await health_check_tool()
        elif name in ("search_startups", "advanced_search"):
            query = arguments.get("query", "")
            if not query:
                return [TextContent(
                    type="text",
                    text="Error: 'query' parameter is required"
                )]
            if name == "search_startups":
                return await search_startups_tool(
                    query, arguments.get("threshold"), arguments.get("limit")
                )
            return await advanced_search_tool(
                query, arguments.get("filters"), arguments.get("threshold"), arguments.get("limit")
            )
        elif name == "get_filter_options":
            return await get_filter_options_tool()
        elif name == "get_search_suggestions":
            return await get_search_suggestions_tool(arguments.get("limit"))
        elif name == "reload_startups":
            return await reload_startups_tool()
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main():
    """Main entry point for the MCP server."""
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)


def run():
    """Console script entry point."""
    import asyncio

    asyncio.run(main())
