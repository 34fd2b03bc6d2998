"""Catalog candidates, priority-ordered candidate assembly and best-match selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

from .text.normalize import Normalizer
from .text.similarity import blended_score

CandidateSource = Literal["shopping_list", "inventory", "items"]
Confidence = Literal["high", "low"]

MIN_THRESHOLD = 0.3
HIGH_CONFIDENCE_THRESHOLD = 0.6


@dataclass(frozen=True)
class MatchCandidate:
    """A catalog entity a parsed name can be linked to.

    The back-references are carried through untouched for the caller.
    """

    id: str
    name: str
    source: CandidateSource
    shopping_list_id: str | None = None
    inventory_id: str | None = None
    shelf_id: str | None = None


@dataclass(frozen=True)
class BestMatch:
    candidate: MatchCandidate
    score: float
    confidence: Confidence

    def to_dict(self) -> dict:
        """JSON shape used by the receipt endpoint."""
        data = {
            "itemId": self.candidate.id,
            "itemName": self.candidate.name,
            "score": self.score,
            "confidence": self.confidence,
            "source": self.candidate.source,
        }
        if self.candidate.shopping_list_id is not None:
            data["shoppingListId"] = self.candidate.shopping_list_id
        if self.candidate.inventory_id is not None:
            data["inventoryId"] = self.candidate.inventory_id
        if self.candidate.shelf_id is not None:
            data["shelfId"] = self.candidate.shelf_id
        return data


@dataclass(frozen=True)
class ShoppingListEntry:
    """An unchecked shopping-list row."""

    id: str
    name: str | None
    item_id: str | None = None


@dataclass(frozen=True)
class InventoryEntry:
    id: str
    item_id: str
    name: str | None
    shelf_id: str | None = None
    quantity: float = 0


@dataclass(frozen=True)
class CatalogItem:
    id: str
    name: str


class CandidatePool:
    """Ordered candidate list where the first candidate added for an id wins.

    Insertion order is the tie-break order used by the matcher, so candidates
    must be added highest priority first.
    """

    def __init__(self, candidates: Iterable[MatchCandidate] = ()) -> None:
        self._candidates: list[MatchCandidate] = []
        self._ids: set[str] = set()
        self.extend(candidates)

    def add(self, candidate: MatchCandidate) -> bool:
        """Add *candidate* unless its id is already present. Returns True if added."""
        if candidate.id in self._ids:
            return False
        self._ids.add(candidate.id)
        self._candidates.append(candidate)
        return True

    def extend(self, candidates: Iterable[MatchCandidate]) -> int:
        return sum(1 for c in candidates if self.add(c))

    def __contains__(self, candidate_id: object) -> bool:
        return candidate_id in self._ids

    def __iter__(self) -> Iterator[MatchCandidate]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def to_list(self) -> list[MatchCandidate]:
        return list(self._candidates)


def build_candidates(
    shopping_list: Iterable[ShoppingListEntry] = (),
    inventory: Iterable[InventoryEntry] = (),
    catalog: Iterable[CatalogItem] = (),
) -> CandidatePool:
    """Assemble match candidates in priority order.

    1. Unchecked shopping-list entries
    2. Depleted inventory (quantity 0), for restocking
    3. Every other catalog item

    An id already supplied by an earlier stage is skipped in later stages.
    """
    pool = CandidatePool()

    for entry in shopping_list:
        if not entry.name:
            continue
        pool.add(
            MatchCandidate(
                id=entry.item_id or entry.id,
                name=entry.name,
                source="shopping_list",
                shopping_list_id=entry.id,
            )
        )

    for entry in inventory:
        if not entry.name or entry.quantity != 0:
            continue
        pool.add(
            MatchCandidate(
                id=entry.item_id,
                name=entry.name,
                source="inventory",
                inventory_id=entry.id,
                shelf_id=entry.shelf_id,
            )
        )

    for item in catalog:
        if not item.name:
            continue
        pool.add(MatchCandidate(id=item.id, name=item.name, source="items"))

    return pool


class CandidateMatcher:
    """Scores a query against candidates with :func:`blended_score`."""

    def __init__(
        self,
        min_score: float = MIN_THRESHOLD,
        high_confidence: float = HIGH_CONFIDENCE_THRESHOLD,
        normalizer: Normalizer | None = None,
    ) -> None:
        self.min_score = min_score
        self.high_confidence = high_confidence
        self._normalizer = normalizer

    def confidence_for(self, score: float) -> Confidence:
        return "high" if score >= self.high_confidence else "low"

    def score(self, query: str, candidate: MatchCandidate) -> float:
        return blended_score(query, candidate.name, self._normalizer)

    def find_best_match(
        self, query: str, candidates: Iterable[MatchCandidate]
    ) -> BestMatch | None:
        """Highest-scoring candidate above the acceptance threshold.

        Ties go to the candidate supplied first.
        """
        best: BestMatch | None = None
        best_score = self.min_score
        for candidate in candidates:
            score = self.score(query, candidate)
            if score > best_score:
                best_score = score
                best = BestMatch(candidate, score, self.confidence_for(score))
        return best

    def find_all_matches(
        self, query: str, candidates: Iterable[MatchCandidate]
    ) -> list[BestMatch]:
        """Every candidate above the threshold, best first (stable on ties)."""
        matches: list[BestMatch] = []
        for candidate in candidates:
            score = self.score(query, candidate)
            if score > self.min_score:
                matches.append(BestMatch(candidate, score, self.confidence_for(score)))
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches


DEFAULT_MATCHER = CandidateMatcher()


def find_best_match(
    query: str, candidates: Sequence[MatchCandidate] | CandidatePool
) -> BestMatch | None:
    return DEFAULT_MATCHER.find_best_match(query, candidates)


def find_all_matches(
    query: str, candidates: Sequence[MatchCandidate] | CandidatePool
) -> list[BestMatch]:
    return DEFAULT_MATCHER.find_all_matches(query, candidates)
