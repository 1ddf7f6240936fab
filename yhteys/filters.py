"""Structured filters applied to startups before scoring."""
from typing import Iterable, List

from yhteys.models import FilterOptions, StartupRecord


def _has_matching_tag(record_tags: Iterable[str], filter_tags: Iterable[str]) -> bool:
    """True if any filter tag is a case-insensitive substring of any record tag."""
    lowered = [t.lower() for t in record_tags]
    return any(
        tag.lower() in record_tag
        for tag in filter_tags
        for record_tag in lowered
    )


def passes_filters(record: StartupRecord, filters: FilterOptions) -> bool:
    """Check a startup against every populated filter.

    Filters combine with AND. Empty values (None, "", 0, []) impose no
    constraint.

    Args:
        record: Startup to check
        filters: Filter constraints

    Returns:
        True if the startup satisfies all populated filters
    """
    if filters.industry and record.industry != filters.industry:
        return False

    if filters.location and filters.location.lower() not in record.location.lower():
        return False

    if filters.funding_stage and record.funding_stage != filters.funding_stage:
        return False

    if filters.min_team_size and record.team_size < filters.min_team_size:
        return False

    if filters.max_team_size and record.team_size > filters.max_team_size:
        return False

    if filters.min_rating and record.rating < filters.min_rating:
        return False

    if filters.tags and not _has_matching_tag(record.tags, filters.tags):
        return False

    return True


def apply_filters(records: Iterable[StartupRecord], filters: FilterOptions) -> List[StartupRecord]:
    """Return the records that pass filters, in their original order."""
    return [r for r in records if passes_filters(r, filters)]
