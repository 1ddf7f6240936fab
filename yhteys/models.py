"""Startup record, filter and result types."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return _int(value)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return _float(value)


def _strings(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        return []
    return [_text(v) for v in value if v is not None]


def _mappings(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if isinstance(v, Mapping)]


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present key, so camelCase and snake_case both work."""
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass
class Contact:
    email: str = ""
    phone: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Contact":
        if not isinstance(data, Mapping):
            return cls()
        return cls(email=_text(data.get("email")), phone=_text(data.get("phone")))


@dataclass
class TeamMember:
    name: str = ""
    role: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamMember":
        return cls(
            name=_text(data.get("name")),
            role=_text(data.get("role")),
            email=_text(data.get("email")),
        )


@dataclass
class Project:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            technologies=_strings(data.get("technologies")),
        )

    def search_text(self) -> str:
        """Name, description and technologies as one blob."""
        return f"{self.name} {self.description} {' '.join(self.technologies)}"


@dataclass
class StartupRecord:
    """A startup profile as published on the marketplace.

    Records are owned by whatever persistence layer produced them; the
    search code only reads them.
    """
    id: str = ""
    name: str = ""
    description: str = ""
    industry: str = ""
    location: str = ""
    website: str = ""
    contact: Contact = field(default_factory=Contact)
    team_members: List[TeamMember] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    funding_stage: str = ""
    team_size: int = 0
    founded_year: int = 0
    rating: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StartupRecord":
        """Build a record from the application's JSON shape.

        Missing, null or wrongly typed values fall back to empty defaults
        instead of raising.

        Args:
            data: Startup mapping with camelCase or snake_case keys

        Returns:
            StartupRecord with every field populated
        """
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            industry=_text(data.get("industry")),
            location=_text(data.get("location")),
            website=_text(data.get("website")),
            contact=Contact.from_dict(data.get("contact")),
            team_members=[TeamMember.from_dict(m) for m in _mappings(_pick(data, "teamMembers", "team_members"))],
            projects=[Project.from_dict(p) for p in _mappings(data.get("projects"))],
            tags=_strings(data.get("tags")),
            funding_stage=_text(_pick(data, "fundingStage", "funding_stage")),
            team_size=_int(_pick(data, "teamSize", "team_size")),
            founded_year=_int(_pick(data, "foundedYear", "founded_year")),
            rating=_float(data.get("rating")),
        )

    @classmethod
    def coerce(cls, value: Any) -> "StartupRecord":
        """Return value unchanged if it is already a record, else parse it."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise TypeError(f"Expected a startup record or mapping, got {type(value).__name__}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the application's camelCase JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "industry": self.industry,
            "location": self.location,
            "website": self.website,
            "contact": {"email": self.contact.email, "phone": self.contact.phone},
            "teamMembers": [
                {"name": m.name, "role": m.role, "email": m.email} for m in self.team_members
            ],
            "projects": [
                {"name": p.name, "description": p.description, "technologies": list(p.technologies)}
                for p in self.projects
            ],
            "tags": list(self.tags),
            "fundingStage": self.funding_stage,
            "teamSize": self.team_size,
            "foundedYear": self.founded_year,
            "rating": self.rating,
        }


@dataclass
class FilterOptions:
    """Structured constraints applied before scoring.

    Empty values (None, "", 0, []) are wildcards.
    """
    industry: Optional[str] = None
    location: Optional[str] = None
    funding_stage: Optional[str] = None
    min_team_size: Optional[int] = None
    max_team_size: Optional[int] = None
    min_rating: Optional[float] = None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "FilterOptions":
        if not data:
            return cls()
        industry = _pick(data, "industry")
        location = _pick(data, "location")
        funding_stage = _pick(data, "fundingStage", "funding_stage")
        return cls(
            industry=_text(industry) if industry is not None else None,
            location=_text(location) if location is not None else None,
            funding_stage=_text(funding_stage) if funding_stage is not None else None,
            min_team_size=_optional_int(_pick(data, "minTeamSize", "min_team_size")),
            max_team_size=_optional_int(_pick(data, "maxTeamSize", "max_team_size")),
            min_rating=_optional_float(_pick(data, "minRating", "min_rating")),
            tags=_strings(data.get("tags")),
        )


@dataclass
class SearchResult:
    """A matched startup with its relevance score."""
    record: StartupRecord
    score: float
    matched_fields: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startup": self.record.to_dict(),
            "score": round(self.score, 2),
            "matchedFields": list(self.matched_fields),
        }


@dataclass
class FacetOptions:
    """Distinct values available for the filter controls."""
    industries: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)
    funding_stages: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "industries": list(self.industries),
            "locations": list(self.locations),
            "fundingStages": list(self.funding_stages),
            "tags": list(self.tags),
        }


StartupLike = Union[StartupRecord, Mapping[str, Any]]
