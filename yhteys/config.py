"""Configuration for the Yhteys startup search."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Tuple


STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "up", "about", "into", "through", "during", "before", "after",
    "above", "below", "between", "among", "is", "are", "was", "were", "be", "been",
    "being", "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "can", "startup", "company", "business",
})

EDITORIAL_SUGGESTIONS: Tuple[str, ...] = (
    "AI automation",
    "workflow platform",
    "data analytics",
    "mobile app",
    "cloud solution",
)


def _default_field_weights() -> Dict[str, float]:
    # Order matters: it is the order fields are reported in matched_fields
    return {
        "name": 3.0,
        "description": 2.0,
        "industry": 2.5,
        "tags": 2.0,
        "projects": 1.5,
    }


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ScoringConfig:
    """Constants that drive fuzzy scoring and ranking."""
    field_weights: Dict[str, float] = field(default_factory=_default_field_weights)

    # Fuzzy matching
    exact_score: float = 100.0
    substring_score: float = 90.0
    fuzzy_cutoff: float = 60.0  # Subsequence ratios at or below this are non-matches

    # Aggregation
    keyword_discount: float = 0.7
    score_normalizer: float = 5.0
    max_score: float = 100.0
    default_threshold: float = 50.0

    # Keyword extraction
    min_keyword_length: int = 3
    stop_words: FrozenSet[str] = STOP_WORDS

    # Suggestions
    top_industries: int = 5
    top_tags: int = 10
    editorial_suggestions: Tuple[str, ...] = EDITORIAL_SUGGESTIONS

    @classmethod
    def from_env(cls) -> "ScoringConfig":
        """Create config from environment variables.

        Only the default threshold is tunable from the environment; the
        scoring constants are fixed so thresholds keep their meaning.
        """
        return cls(
            default_threshold=float(os.environ.get("YHTEYS_SEARCH_THRESHOLD", "50")),
        )


@dataclass
class Config:
    """Main configuration for the Yhteys search server."""
    scoring: ScoringConfig = field(default_factory=ScoringConfig.from_env)
    startups_path: Optional[Path] = None  # None = use default
    include_samples: bool = True  # Merge the built-in sample catalog
    interactive_threshold: float = 30.0  # Threshold used by the search tools
    result_limit: int = 20  # Max results returned per tool call

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        path_str = os.environ.get("YHTEYS_STARTUPS_FILE")
        startups_path = Path(path_str) if path_str else None

        return cls(
            scoring=ScoringConfig.from_env(),
            startups_path=startups_path,
            include_samples=_env_bool("YHTEYS_INCLUDE_SAMPLES", True),
            interactive_threshold=float(os.environ.get("YHTEYS_INTERACTIVE_THRESHOLD", "30")),
            result_limit=int(os.environ.get("YHTEYS_RESULT_LIMIT", "20")),
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance.

    Returns:
        Config loaded from environment
    """
    global _config

    if _config is None:
        _config = Config.from_env()

    return _config
