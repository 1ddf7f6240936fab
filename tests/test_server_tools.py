"""Tests for server tool registration and tool handlers."""
import json
import pytest
import asyncio
from unittest.mock import patch

from yhteys import server as server_module
from yhteys.config import Config
from yhteys.server import (
    advanced_search_tool,
    create_server,
    get_filter_options_tool,
    get_search_suggestions_tool,
    health_check_tool,
    load_startups,
    reload_startups_tool,
    search_startups_tool,
)


@pytest.fixture
def empty_cache(monkeypatch):
    """Start each catalog test without a cached catalog."""
    monkeypatch.setattr(server_module, "_startups_cache", None)


class TestServerTools:
    def test_server_creates(self):
        server = create_server()
        assert server.name == "yhteys-search-mcp"

    def test_all_tools_registered(self):
        from mcp.types import ListToolsRequest

        server = create_server()

        async def check():
            result = await server.request_handlers[ListToolsRequest](None)
            return result.root.tools

        tools = asyncio.run(check())
        tool_names = [t.name for t in tools]

        expected = [
            "health_check",
            "search_startups",
            "advanced_search",
            "get_filter_options",
            "get_search_suggestions",
            "reload_startups",
        ]

        assert len(tools) == 6
        for name in expected:
            assert name in tool_names, f"Missing tool: {name}"


class TestLoadStartups:
    def test_merges_stored_and_samples(self, empty_cache, startups_path):
        with patch("yhteys.server.get_config", return_value=Config(startups_path=startups_path)):
            startups = load_startups()
        assert startups[0].id == "startup_local_1"
        assert len(startups) == 8

    def test_uses_cache(self, empty_cache, startups_path):
        with patch("yhteys.server.get_config", return_value=Config(startups_path=startups_path)):
            assert load_startups() is load_startups()

    def test_missing_file_falls_back_to_samples(self, empty_cache, tmp_path, capsys):
        config = Config(startups_path=tmp_path / "missing.json")
        with patch("yhteys.server.get_config", return_value=config):
            startups = load_startups()
        assert len(startups) == 6
        assert "Could not find startups file" in capsys.readouterr().err

    def test_malformed_file_falls_back_to_samples(self, empty_cache, tmp_path, capsys):
        path = tmp_path / "startups.json"
        path.write_text("{broken")
        with patch("yhteys.server.get_config", return_value=Config(startups_path=path)):
            startups = load_startups()
        assert len(startups) == 6
        assert "Error loading startups" in capsys.readouterr().err

    def test_samples_disabled(self, empty_cache, startups_path):
        config = Config(startups_path=startups_path, include_samples=False)
        with patch("yhteys.server.get_config", return_value=config):
            assert [s.id for s in load_startups()] == ["startup_local_1", "startup_local_2"]


class TestSearchTools:
    @pytest.mark.asyncio
    async def test_search_returns_ranked_json(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await search_startups_tool("AI automation")
        data = json.loads(result[0].text)
        ids = [item["startup"]["id"] for item in data]
        assert "startup_1" in ids
        scores = [item["score"] for item in data]
        assert scores == sorted(scores, reverse=True)
        assert "matchedFields" in data[0]

    @pytest.mark.asyncio
    async def test_search_respects_limit(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await search_startups_tool("AI automation", threshold=0, limit=2)
        assert len(json.loads(result[0].text)) == 2

    @pytest.mark.asyncio
    async def test_search_no_match(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await search_startups_tool("zzzznonexistentqueryterm")
        assert result[0].text == "No startups found matching query: zzzznonexistentqueryterm"

    @pytest.mark.asyncio
    async def test_search_empty_catalog(self):
        with patch("yhteys.server.load_startups", return_value=[]):
            result = await search_startups_tool("AI")
        assert result[0].text.startswith("No startups available")

    @pytest.mark.asyncio
    async def test_advanced_search_applies_filters(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await advanced_search_tool("data analytics", {"minTeamSize": 10})
        ids = [item["startup"]["id"] for item in json.loads(result[0].text)]
        assert ids
        assert "startup_2" not in ids

    @pytest.mark.asyncio
    async def test_advanced_search_no_match(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await advanced_search_tool("AI", {"industry": "Biotech"})
        assert result[0].text.startswith("No startups found matching query and filters")


class TestCatalogTools:
    @pytest.mark.asyncio
    async def test_filter_options(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await get_filter_options_tool()
        data = json.loads(result[0].text)
        assert data["industries"] == ["AI/ML", "CleanTech", "Cybersecurity", "HealthTech", "SaaS"]

    @pytest.mark.asyncio
    async def test_suggestions_limit(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await get_search_suggestions_tool(limit=6)
        assert json.loads(result[0].text) == ["SaaS", "AI/ML", "Cybersecurity", "CleanTech", "HealthTech", "AI"]

    @pytest.mark.asyncio
    async def test_health_check(self, sample_startups):
        with patch("yhteys.server.load_startups", return_value=sample_startups):
            result = await health_check_tool()
        data = json.loads(result[0].text)
        assert data["status"] == "ok"
        assert data["startups"] == 6

    @pytest.mark.asyncio
    async def test_reload(self, empty_cache, startups_path):
        with patch("yhteys.server.get_config", return_value=Config(startups_path=startups_path)):
            result = await reload_startups_tool()
        data = json.loads(result[0].text)
        assert data == {"status": "reloaded", "startups": 8}
