"""Filter facets and search suggestions derived from the startup catalog."""
from collections import Counter
from typing import Iterable, List, Optional

from yhteys.config import ScoringConfig
from yhteys.models import FacetOptions, StartupLike, StartupRecord


def _records(startups: Iterable[StartupLike]) -> List[StartupRecord]:
    if startups is None:
        raise TypeError("startups must be an iterable of startup records, not None")
    return [StartupRecord.coerce(s) for s in startups]


def get_filter_options(startups: Iterable[StartupLike]) -> FacetOptions:
    """Collect the distinct values available for each filter.

    Args:
        startups: Startup catalog

    Returns:
        FacetOptions with sorted, de-duplicated values
    """
    records = _records(startups)
    return FacetOptions(
        industries=sorted({r.industry for r in records}),
        locations=sorted({r.location for r in records}),
        funding_stages=sorted({r.funding_stage for r in records}),
        tags=sorted({tag for r in records for tag in r.tags}),
    )


def get_search_suggestions(
    startups: Iterable[StartupLike], config: Optional[ScoringConfig] = None
) -> List[str]:
    """Suggest searches from popular industries and tags.

    Top industries come first, then top tags, then a fixed list of
    editorial suggestions. Duplicates are dropped, keeping the first
    occurrence. Frequency ties keep the order values were first seen.

    Args:
        startups: Startup catalog
        config: Scoring config with suggestion limits

    Returns:
        List of suggestion strings
    """
    config = config or ScoringConfig()
    records = _records(startups)

    industry_counts = Counter(r.industry for r in records if r.industry)
    tag_counts = Counter(tag for r in records for tag in r.tags if tag)

    # dict keeps insertion order, so it doubles as an ordered set
    suggestions = {}
    for industry, _ in industry_counts.most_common(config.top_industries):
        suggestions[industry] = None
    for tag, _ in tag_counts.most_common(config.top_tags):
        suggestions[tag] = None
    for term in config.editorial_suggestions:
        suggestions[term] = None

    return list(suggestions)
