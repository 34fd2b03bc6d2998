"""Receipt matching: parse receipt text, detect the store, link items to the catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .candidates import (
    BestMatch,
    CandidateMatcher,
    CandidatePool,
    CatalogItem,
    InventoryEntry,
    ShoppingListEntry,
    build_candidates,
)
from .receipts.models import DetectedStore, KnownStore, ParsedItem, SkippedLine
from .receipts.parser import ReceiptParser, calculate_items_total
from .receipts.stores import detect_store

if TYPE_CHECKING:
    from .config import MatchingConfig

logger = logging.getLogger(__name__)


@dataclass
class MatchedReceiptItem:
    """A parsed receipt item with its catalog match, if any."""

    item: ParsedItem
    match: BestMatch | None = None

    def to_dict(self) -> dict:
        data = self.item.to_dict()
        data["match"] = self.match.to_dict() if self.match else None
        return data


@dataclass
class ReceiptMatchResult:
    store: DetectedStore | None = None
    items: list[MatchedReceiptItem] = field(default_factory=list)
    skipped_lines: list[SkippedLine] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return sum(1 for i in self.items if i.match is not None)

    @property
    def items_total(self) -> float:
        return calculate_items_total([i.item for i in self.items])

    def to_dict(self) -> dict:
        return {
            "store": self.store.to_dict() if self.store else None,
            "items": [i.to_dict() for i in self.items],
            "skippedLines": [s.to_dict() for s in self.skipped_lines],
        }


class ReceiptMatcher:
    """Runs the full receipt flow for one household.

    The caller supplies the household's stores, unchecked shopping-list rows,
    inventory and item catalog; nothing is read or written here.
    """

    def __init__(self, config: MatchingConfig | None = None) -> None:
        if config is None:
            from .config import MatchingConfig

            config = MatchingConfig()
        self.config = config
        self.parser: ReceiptParser = config.receipt_parser()
        self.matcher: CandidateMatcher = config.candidate_matcher()

    def match_receipt(
        self,
        text: str | None,
        known_stores: Sequence[KnownStore] = (),
        shopping_list: Iterable[ShoppingListEntry] = (),
        inventory: Iterable[InventoryEntry] = (),
        catalog: Iterable[CatalogItem] = (),
    ) -> ReceiptMatchResult:
        if not text:
            return ReceiptMatchResult()

        max_length = self.config.receipt.max_text_length
        if len(text) > max_length:
            logger.warning(
                "Receipt text truncated from %d to %d characters", len(text), max_length
            )
            text = text[:max_length]

        parsed = self.parser.parse(text)
        store = detect_store(
            text, known_stores, header_lines=self.config.receipt.header_lines
        )
        pool = build_candidates(shopping_list, inventory, catalog)

        result = ReceiptMatchResult(store=store, skipped_lines=parsed.skipped_lines)
        for item in parsed.items:
            result.items.append(MatchedReceiptItem(item, self._match_item(item, pool)))

        logger.info(
            "Receipt matched: store=%s, %d items (%d linked), %d skipped lines",
            store.name if store else None,
            len(result.items),
            result.matched_count,
            len(result.skipped_lines),
        )
        return result

    def _match_item(self, item: ParsedItem, pool: CandidatePool) -> BestMatch | None:
        match = self.matcher.find_best_match(item.cleaned_name, pool)
        if match:
            logger.debug(
                "Matched %r -> %r (%.3f, %s)",
                item.cleaned_name,
                match.candidate.name,
                match.score,
                match.candidate.source,
            )
        else:
            logger.debug("No match for %r", item.cleaned_name)
        return match
