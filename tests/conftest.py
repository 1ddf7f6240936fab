"""Shared fixtures for tests."""
import json
import pytest

from yhteys.models import StartupRecord
from yhteys.sample_data import get_sample_startups


STORED_STARTUPS = [
    {
        "id": "startup_local_1",
        "name": "Nordic Ledger",
        "description": "Bookkeeping automation for small enterprises in the Nordics.",
        "industry": "FinTech",
        "location": "Helsinki, Finland",
        "website": "https://nordicledger.fi",
        "contact": {"email": "hei@nordicledger.fi", "phone": "+358 40 123 4567"},
        "teamMembers": [{"name": "Aino Virtanen", "role": "CEO", "email": "aino@nordicledger.fi"}],
        "projects": [
            {
                "name": "Ledger Sync",
                "description": "Bank feed reconciliation",
                "technologies": ["Python", "PostgreSQL"],
            }
        ],
        "tags": ["fintech", "accounting", "automation"],
        "fundingStage": "Seed",
        "teamSize": 4,
        "foundedYear": 2023,
        "rating": 4.2,
    },
    {
        "id": "startup_local_2",
        "name": "Arctic Vision",
        "industry": "AI/ML",
        "location": "Oulu, Finland",
        "tags": ["computer vision"],
    },
]


@pytest.fixture
def sample_startups():
    """Return the built-in sample catalog as records."""
    return get_sample_startups()


@pytest.fixture
def startups_by_id(sample_startups):
    return {s.id: s for s in sample_startups}


@pytest.fixture
def startups_path(tmp_path):
    """Create a temporary startups file with locally stored startups."""
    startups_file = tmp_path / "startups.json"
    startups_file.write_text(json.dumps(STORED_STARTUPS, indent=2))
    return startups_file


@pytest.fixture
def make_startup():
    """Build a minimal record; unspecified fields stay empty."""
    def _make(**fields) -> StartupRecord:
        return StartupRecord(**fields)
    return _make
