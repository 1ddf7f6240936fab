"""Tests for startups_reader module."""
import json
import pytest

from yhteys.models import StartupRecord
from yhteys.sample_data import get_sample_startups
from yhteys.startups_reader import (
    get_default_startups_path,
    merge_catalogs,
    read_startups,
)


class TestReadStartups:
    def test_reads_list(self, startups_path):
        startups = read_startups(startups_path)
        assert [s.id for s in startups] == ["startup_local_1", "startup_local_2"]
        assert startups[0].location == "Helsinki, Finland"

    def test_sparse_entries_get_defaults(self, startups_path):
        sparse = read_startups(startups_path)[1]
        assert sparse.description == ""
        assert sparse.projects == []

    def test_reads_wrapped_object(self, tmp_path):
        path = tmp_path / "startups.json"
        path.write_text(json.dumps({"startups": [{"id": "a", "name": "A"}]}))
        assert [s.name for s in read_startups(path)] == ["A"]

    def test_skips_non_objects(self, tmp_path):
        path = tmp_path / "startups.json"
        path.write_text(json.dumps([{"id": "a"}, "junk", 3, None]))
        assert [s.id for s in read_startups(path)] == ["a"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_startups(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "startups.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            read_startups(path)

    def test_unexpected_shape(self, tmp_path):
        path = tmp_path / "startups.json"
        path.write_text(json.dumps({"items": []}))
        with pytest.raises(ValueError):
            read_startups(path)

    def test_default_path(self):
        path = get_default_startups_path()
        assert path.name == "startups.json"
        assert path.parent.name == ".yhteys"


class TestMergeCatalogs:
    def test_stored_first(self, startups_path):
        merged = merge_catalogs(read_startups(startups_path), get_sample_startups())
        assert merged[0].id == "startup_local_1"
        assert len(merged) == 8

    def test_sample_with_taken_id_dropped(self):
        stored = [StartupRecord(id="startup_1", name="Renamed")]
        merged = merge_catalogs(stored, get_sample_startups())
        assert [s.name for s in merged if s.id == "startup_1"] == ["Renamed"]
        assert len(merged) == 6

    def test_records_without_id_kept(self):
        merged = merge_catalogs([StartupRecord(name="A")], [StartupRecord(name="B")])
        assert [s.name for s in merged] == ["A", "B"]
