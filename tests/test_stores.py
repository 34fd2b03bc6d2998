"""Tests for store detection."""

import pytest

from pantry.matching.receipts.models import KnownStore
from pantry.matching.receipts.stores import STORE_PATTERNS, detect_store


class TestDetectStore:
    def test_welcome_to_target_with_known_store(self):
        store = detect_store(
            "WELCOME TO TARGET\n123 MAIN ST", [KnownStore(id="s1", name="Target")]
        )
        assert store is not None
        assert store.name == "Target"
        assert store.matched_id == "s1"
        assert store.to_dict() == {"name": "Target", "matchedId": "s1"}

    def test_retailer_pattern_without_known_stores(self):
        store = detect_store("WALMART SUPERCENTER\nSTORE #1234")
        assert store.name == "Walmart"
        assert store.matched_id is None

    def test_retailer_pattern_cross_referenced(self):
        known = [KnownStore(id="k1", name="Costco"), KnownStore(id="k2", name="Trader Joe's")]
        store = detect_store("TRADER JOES #552\nBOSTON MA", known)
        assert store.name == "Trader Joe's"
        assert store.matched_id == "k2"

    def test_known_store_checked_first(self):
        known = [KnownStore(id="k1", name="Corner Market")]
        store = detect_store("Corner Market\nnext to the Walmart", known)
        assert store.name == "Corner Market"
        assert store.matched_id == "k1"

    def test_known_stores_in_supplied_order(self):
        known = [KnownStore(id="a", name="Fresh Foods"), KnownStore(id="b", name="Foods")]
        assert detect_store("FRESH FOODS MARKET", known).matched_id == "a"

    def test_welcome_greeting(self):
        store = detect_store("Welcome to Bob's Grocery!\nBREAD 2.49")
        assert store.name == "Bob's Grocery"
        assert store.matched_id is None

    def test_welcome_greeting_cross_referenced(self):
        known = [KnownStore(id="x", name="bob's grocery", location="Main St")]
        store = detect_store("Hello\nWelcome to Bob's Grocery\n", known)
        # Known names are matched as substrings before the greeting is tried
        assert store.matched_id == "x"

    def test_only_header_lines_inspected(self):
        text = "\n".join(["APPLES 1.00"] * 20 + ["TARGET"])
        assert detect_store(text) is None

    def test_header_line_limit_configurable(self):
        text = "\n".join(["APPLES 1.00"] * 20 + ["TARGET"])
        assert detect_store(text, header_lines=25).name == "Target"

    def test_blank_known_store_ignored(self):
        assert detect_store("ANYTHING 1.00", [KnownStore(id="k0", name="  ")]) is None

    def test_no_match(self):
        assert detect_store("BREAD 2.49\nMILK 3.49") is None

    @pytest.mark.parametrize(
        "header",
        [
            "SHOP THE BEST DEALS",
            "TARGETED SAVINGS",
            "GIANTS TICKETS",
            "CALDIERA PIZZA",
            "TRANSACTION CVSX",
        ],
    )
    def test_retailer_names_inside_words_ignored(self, header):
        assert detect_store(header) is None

    @pytest.mark.parametrize(
        "header, name",
        [("H-E-B #221", "HEB"), ("GIANT FOOD", "Giant"), ("SUPER TARGET", "Target")],
    )
    def test_retailer_names_as_words(self, header, name):
        assert detect_store(header).name == name

    def test_empty(self):
        assert detect_store("") is None
        assert detect_store(None) is None

    def test_pattern_table(self):
        names = [name for _, name in STORE_PATTERNS]
        assert names[0] == "Walmart"
        assert "Save-A-Lot" in names
        assert len(names) == len(set(names))
