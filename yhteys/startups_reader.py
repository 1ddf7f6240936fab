"""Startup catalog reader module."""
import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from yhteys.models import StartupRecord


def get_default_startups_path() -> Path:
    """Get the default path of the exported startups file.

    Returns:
        Path to ~/.yhteys/startups.json
    """
    return Path.home() / ".yhteys" / "startups.json"


def load_startups_file(startups_path: Optional[Path] = None) -> Any:
    """Load the startups JSON file.

    Args:
        startups_path: Optional path to the file. If None, uses the default location.

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is malformed
    """
    if startups_path is None:
        startups_path = get_default_startups_path()

    if not startups_path.exists():
        raise FileNotFoundError(f"Startups file not found at {startups_path}")

    with open(startups_path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_startups(startups_path: Optional[Path] = None) -> List[StartupRecord]:
    """Read all startups from the startups file.

    The file holds either a list of startup objects (as the web app keeps
    them in local storage) or an object with a "startups" list.

    Args:
        startups_path: Optional path to the file. If None, uses the default location.

    Returns:
        List of StartupRecord. Entries that are not JSON objects are skipped.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is malformed
        ValueError: If the JSON has an unexpected shape
    """
    data = load_startups_file(startups_path)

    if isinstance(data, Mapping):
        data = data.get("startups")

    if not isinstance(data, list):
        raise ValueError("Startups file must contain a list or an object with a 'startups' list")

    return [StartupRecord.from_dict(entry) for entry in data if isinstance(entry, Mapping)]


def merge_catalogs(stored: Iterable[StartupRecord], samples: Iterable[StartupRecord]) -> List[StartupRecord]:
    """Combine stored startups with the sample catalog.

    Stored startups come first. Samples whose id is already taken by a
    stored startup are dropped.
    """
    merged = list(stored)
    seen_ids = {r.id for r in merged if r.id}
    for record in samples:
        if record.id and record.id in seen_ids:
            continue
        merged.append(record)
    return merged
