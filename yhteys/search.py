"""Search engine module for startups."""
import re
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Tuple, Union

from yhteys.config import ScoringConfig
from yhteys.filters import apply_filters
from yhteys.models import FilterOptions, SearchResult, StartupLike, StartupRecord


_ALPHA_RE = re.compile(r"[a-zA-Z]+")

FiltersLike = Union[FilterOptions, Mapping[str, Any], None]


class SearchEngine(Protocol):
    """Protocol for search engines to allow extensibility."""

    def search(
        self, query: str, startups: Iterable[StartupLike], threshold: Optional[float] = None
    ) -> List[SearchResult]:
        """Search startups based on query.

        Args:
            query: Free-text search query
            startups: Candidate startups
            threshold: Minimum normalized score to include a startup

        Returns:
            List of matching startups, sorted by relevance
        """
        ...

    def advanced_search(
        self,
        query: str,
        startups: Iterable[StartupLike],
        filters: FiltersLike,
        threshold: Optional[float] = None,
    ) -> List[SearchResult]:
        """Filter startups, then search the survivors."""
        ...


class FuzzySearchEngine:
    """Weighted multi-field fuzzy search engine.

    Every record is scored against the full query and against each
    keyword extracted from it. Keyword hits count for less than full-query
    hits. The summed score is divided by a fixed normalizer and capped.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def extract_keywords(self, text: str) -> List[str]:
        """Extract meaningful keywords from a natural-language query.

        Repeated words are kept so that emphasis adds weight.

        Args:
            text: Query text

        Returns:
            Lowercase keywords in their original order
        """
        words = text.lower().split()
        return [
            word for word in words
            if len(word) >= self.config.min_keyword_length
            and word not in self.config.stop_words
            and _ALPHA_RE.fullmatch(word)
        ]

    def fuzzy_score(self, query: str, text: str) -> float:
        """Score how well query matches text.

        Exact match scores highest, then substring containment, then the
        share of query characters found in order within text.

        Args:
            query: Query or keyword
            text: Field text to match against

        Returns:
            Score in [0, 100]; 0 means no match
        """
        query = query.lower()
        text = text.lower()

        if query in text:
            return self.config.exact_score if text == query else self.config.substring_score

        # Ordered subsequence scan
        matched = 0
        for char in text:
            if matched == len(query):
                break
            if char == query[matched]:
                matched += 1

        ratio = matched / len(query) * 100
        return ratio if ratio > self.config.fuzzy_cutoff else 0.0

    def searchable_fields(self, record: StartupRecord) -> List[Tuple[str, str, float]]:
        """Return (field, text, weight) for each weighted field of a record."""
        texts = {
            "name": record.name,
            "description": record.description,
            "industry": record.industry,
            "tags": " ".join(record.tags),
            "projects": " ".join(p.search_text() for p in record.projects),
        }
        return [
            (name, texts.get(name, ""), weight)
            for name, weight in self.config.field_weights.items()
        ]

    def score_record(
        self, query: str, keywords: List[str], record: StartupRecord
    ) -> Tuple[float, List[str]]:
        """Score a single startup against a query and its keywords.

        Args:
            query: Full query string
            keywords: Keywords extracted from the query
            record: Startup to score

        Returns:
            Tuple of (normalized score, matched field names)
        """
        fields = self.searchable_fields(record)
        total = 0.0
        matched_fields: List[str] = []

        for name, text, weight in fields:
            score = self.fuzzy_score(query, text)
            if score > 0:
                total += score * weight
                matched_fields.append(name)

        for keyword in keywords:
            for name, text, weight in fields:
                score = self.fuzzy_score(keyword, text)
                if score > 0:
                    total += score * weight * self.config.keyword_discount
                    if name not in matched_fields:
                        matched_fields.append(name)

        normalized = min(total / self.config.score_normalizer, self.config.max_score)
        return normalized, matched_fields

    def search(
        self, query: str, startups: Iterable[StartupLike], threshold: Optional[float] = None
    ) -> List[SearchResult]:
        """Search startups using weighted fuzzy matching.

        Args:
            query: Free-text search query
            startups: Candidate startups (records or raw mappings)
            threshold: Minimum normalized score; defaults to the configured one

        Returns:
            Matching startups, highest score first. Equal scores keep
            their input order.

        Raises:
            TypeError: If startups is None
        """
        if startups is None:
            raise TypeError("startups must be an iterable of startup records, not None")

        if not query or not query.strip():
            return []

        if threshold is None:
            threshold = self.config.default_threshold

        keywords = self.extract_keywords(query)

        results = []
        for startup in startups:
            record = StartupRecord.coerce(startup)
            score, matched_fields = self.score_record(query, keywords, record)
            if score >= threshold:
                results.append(SearchResult(record=record, score=score, matched_fields=matched_fields))

        # list.sort is stable, also with reverse=True
        results.sort(key=lambda r: r.score, reverse=True)

        return results

    def advanced_search(
        self,
        query: str,
        startups: Iterable[StartupLike],
        filters: FiltersLike,
        threshold: Optional[float] = None,
    ) -> List[SearchResult]:
        """Apply filters first, then search within the remaining startups.

        Args:
            query: Free-text search query
            startups: Candidate startups
            filters: FilterOptions or a mapping with filter keys
            threshold: Minimum normalized score

        Returns:
            Matching startups that also pass every populated filter
        """
        if startups is None:
            raise TypeError("startups must be an iterable of startup records, not None")

        if not query or not query.strip():
            return []

        if not isinstance(filters, FilterOptions):
            filters = FilterOptions.from_dict(filters)

        records = [StartupRecord.coerce(s) for s in startups]
        filtered = apply_filters(records, filters)

        return self.search(query, filtered, threshold)


_default_engine = FuzzySearchEngine()


def extract_keywords(text: str) -> List[str]:
    """Extract keywords using the default stop-word list."""
    return _default_engine.extract_keywords(text)


def fuzzy_score(query: str, text: str) -> float:
    """Fuzzy match score in [0, 100] using the default constants."""
    return _default_engine.fuzzy_score(query, text)


def score_record(query: str, keywords: List[str], record: StartupLike) -> Tuple[float, List[str]]:
    """Score one startup with the default engine."""
    return _default_engine.score_record(query, keywords, StartupRecord.coerce(record))


def search_startups(
    query: str, startups: Iterable[StartupLike], threshold: float = 50
) -> List[SearchResult]:
    """Search startups by free text.

    Args:
        query: Free-text search query
        startups: Candidate startups
        threshold: Minimum normalized score (default 50)

    Returns:
        Matching startups sorted by score, highest first
    """
    return _default_engine.search(query, startups, threshold)


def advanced_search(
    query: str, startups: Iterable[StartupLike], filters: FiltersLike, threshold: float = 50
) -> List[SearchResult]:
    """Search startups that pass the given filters."""
    return _default_engine.advanced_search(query, startups, filters, threshold)
