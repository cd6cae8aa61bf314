"""Approximate multi-field ranking of snippets.

Each snippet is scored against the query field by field with rapidfuzz.
``partial_ratio`` finds the best-aligned window anywhere in the field, so a
match in the middle of a body counts as much as a prefix and small typos or
transpositions still score well. A field matches when its similarity reaches
``1 - threshold``; fields shorter than ``min_match_char_length`` never match.

The score is the weighted sum of matching fields over the total weight.
Title weighs most, then tags, description and body. Snippets with no
matching field are dropped; the rest are returned best first, ties in input
order.

Building the index is the expensive part, so it lives in a RankingSession
built once per collection snapshot. FuzzyRanker keeps the last session and
reuses it while it is handed the same collection object, or a new object
with equal snippets, as a database-backed repository returns on every read.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from snipforge.config import SearchSettings
from snipforge.domain.model import Snippet


@dataclass(frozen=True)
class RankingOptions:
    """Matching parameters."""

    threshold: float = 0.4
    min_match_char_length: int = 2
    title_weight: float = 2.0
    tags_weight: float = 1.5
    description_weight: float = 1.0
    body_weight: float = 0.5

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> "RankingOptions":
        return cls(
            threshold=settings.fuzzy_threshold,
            min_match_char_length=settings.min_match_char_length,
            title_weight=settings.title_weight,
            tags_weight=settings.tags_weight,
            description_weight=settings.description_weight,
            body_weight=settings.body_weight,
        )

    @property
    def total_weight(self) -> float:
        return self.title_weight + self.tags_weight + self.description_weight + self.body_weight


@dataclass(frozen=True)
class _IndexEntry:
    snippet: Snippet
    title: str
    tags: tuple[str, ...]
    description: str
    body: str


def _similarity(query: str, text: str) -> float:
    """Similarity in [0, 1] between a processed query and a processed field."""
    if not text:
        return 0.0
    if len(text) < len(query):
        return fuzz.ratio(query, text) / 100.0
    return fuzz.partial_ratio(query, text) / 100.0


class RankingSession:
    """Ranking index over one snapshot of the snippet collection."""

    def __init__(
        self, snippets: Sequence[Snippet], options: RankingOptions | None = None
    ) -> None:
        """Build the index.

        Args:
            snippets: Collection snapshot; must not change while the session is used
            options: Matching parameters
        """
        self.snippets = snippets
        self.options = options or RankingOptions()
        self._index = [
            _IndexEntry(
                snippet=snippet,
                title=default_process(snippet.title),
                tags=tuple(default_process(tag) for tag in snippet.tags),
                description=default_process(snippet.description),
                body=default_process(snippet.body),
            )
            for snippet in snippets
        ]

    def rebind(self, snippets: Sequence[Snippet]) -> None:
        """Point the index at an equal collection, keeping the processed fields."""
        self.snippets = snippets
        self._index = [
            replace(entry, snippet=snippet)
            for entry, snippet in zip(self._index, snippets)
        ]

    def search(self, query: str) -> Sequence[Snippet]:
        """Rank the snapshot against ``query``.

        Args:
            query: Free text

        Returns:
            The snapshot itself for a blank query, otherwise matching snippets
            best first
        """
        if not query.strip():
            return self.snippets

        processed = default_process(query)
        if len(processed) < self.options.min_match_char_length:
            return []

        scored: list[tuple[float, Snippet]] = []
        for entry in self._index:
            score = self._score(processed, entry)
            if score is not None:
                scored.append((score, entry.snippet))

        # list.sort is stable, equal scores keep input order
        scored.sort(key=lambda item: item[0], reverse=True)
        return [snippet for _, snippet in scored]

    def _score(self, query: str, entry: _IndexEntry) -> float | None:
        options = self.options
        fields = (
            (options.title_weight, (entry.title,)),
            (options.tags_weight, entry.tags),
            (options.description_weight, (entry.description,)),
            (options.body_weight, (entry.body,)),
        )

        total = 0.0
        matched = False
        for weight, values in fields:
            best = max(
                (
                    _similarity(query, value)
                    for value in values
                    if len(value) >= options.min_match_char_length
                ),
                default=0.0,
            )
            if best >= 1.0 - options.threshold:
                matched = True
                total += weight * best

        return total / options.total_weight if matched else None


class FuzzyRanker:
    """Caller-owned ranking handle that reuses its index per collection.

    Passing the same collection object again reuses the index without
    looking at its contents. Any other object is compared snippet by snippet,
    and the index is rebuilt only when the contents differ, so callers must
    hand over a fresh collection object whenever its contents change.
    """

    def __init__(self, options: RankingOptions | None = None) -> None:
        self.options = options or RankingOptions()
        self._session: RankingSession | None = None

    def session_for(self, snippets: Sequence[Snippet]) -> RankingSession:
        """Return the session for ``snippets``, building it if needed."""
        session = self._session
        if session is not None and session.snippets is snippets:
            return session
        if session is not None and tuple(session.snippets) == tuple(snippets):
            session.rebind(snippets)
            return session
        self._session = RankingSession(snippets, self.options)
        return self._session

    def rank(self, snippets: Sequence[Snippet], query: str) -> Sequence[Snippet]:
        """Order ``snippets`` by similarity to ``query``.

        A blank query returns ``snippets`` itself without building an index.
        """
        if not query.strip():
            return snippets
        return self.session_for(snippets).search(query)
