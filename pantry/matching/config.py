"""TOML configuration loader for the matching pipeline."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .candidates import HIGH_CONFIDENCE_THRESHOLD, MIN_THRESHOLD, CandidateMatcher
from .receipts.lines import DEFAULT_MAX_PRICE, DEFAULT_MIN_NAME_LENGTH, DEFAULT_MIN_PRICE
from .receipts.parser import ReceiptParser
from .receipts.stores import DEFAULT_HEADER_LINES
from .recipes.ingredients import DEFAULT_SIMILARITY_THRESHOLD, IngredientMatcher
from .text.lexicon import DEFAULT_ABBREVIATIONS, DEFAULT_DESCRIPTORS, DEFAULT_SYNONYMS
from .text.normalize import Normalizer

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

LOG_LEVEL_ENV = "PANTRY_MATCH_LOG_LEVEL"
DEFAULT_MAX_TEXT_LENGTH = 50_000


@dataclass
class ScoringConfig:
    min_score: float = MIN_THRESHOLD
    high_confidence: float = HIGH_CONFIDENCE_THRESHOLD


@dataclass
class ReceiptConfig:
    min_price: float = DEFAULT_MIN_PRICE
    max_price: float = DEFAULT_MAX_PRICE
    min_name_length: int = DEFAULT_MIN_NAME_LENGTH
    header_lines: int = DEFAULT_HEADER_LINES
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH


@dataclass
class IngredientConfig:
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD


@dataclass
class LexiconConfig:
    """User additions layered over the built-in tables."""

    abbreviations: dict[str, str] = field(default_factory=dict)
    synonyms: dict[str, str] = field(default_factory=dict)
    extra_descriptors: list[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class MatchingConfig:
    matching: ScoringConfig = field(default_factory=ScoringConfig)
    receipt: ReceiptConfig = field(default_factory=ReceiptConfig)
    ingredients: IngredientConfig = field(default_factory=IngredientConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Raise ValueError if any threshold or limit is out of range."""
        for name, value in [
            ("matching.min_score", self.matching.min_score),
            ("matching.high_confidence", self.matching.high_confidence),
            ("ingredients.similarity_threshold", self.ingredients.similarity_threshold),
        ]:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        if self.matching.min_score > self.matching.high_confidence:
            raise ValueError(
                "matching.min_score must not exceed matching.high_confidence"
            )
        if self.receipt.min_price >= self.receipt.max_price:
            raise ValueError("receipt.min_price must be less than receipt.max_price")
        for name, value in [
            ("receipt.min_name_length", self.receipt.min_name_length),
            ("receipt.header_lines", self.receipt.header_lines),
            ("receipt.max_text_length", self.receipt.max_text_length),
        ]:
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def normalizer(self) -> Normalizer:
        abbreviations = DEFAULT_ABBREVIATIONS
        if self.lexicon.abbreviations:
            abbreviations = abbreviations.extend(self.lexicon.abbreviations)
        descriptors = DEFAULT_DESCRIPTORS | {
            d.lower() for d in self.lexicon.extra_descriptors
        }
        return Normalizer(abbreviations=abbreviations, descriptors=descriptors)

    def receipt_parser(self) -> ReceiptParser:
        return ReceiptParser(
            min_price=self.receipt.min_price,
            max_price=self.receipt.max_price,
            min_name_length=self.receipt.min_name_length,
        )

    def candidate_matcher(self) -> CandidateMatcher:
        return CandidateMatcher(
            min_score=self.matching.min_score,
            high_confidence=self.matching.high_confidence,
            normalizer=self.normalizer(),
        )

    def ingredient_matcher(self) -> IngredientMatcher:
        synonyms = DEFAULT_SYNONYMS
        if self.lexicon.synonyms:
            synonyms = synonyms.extend(self.lexicon.synonyms)
        return IngredientMatcher(
            normalizer=self.normalizer(),
            synonyms=synonyms,
            similarity_threshold=self.ingredients.similarity_threshold,
        )


def load_config(path: str | Path | None = None) -> MatchingConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The log level can be set via the PANTRY_MATCH_LOG_LEVEL environment variable.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    mat = raw.get("matching", {})
    rcp = raw.get("receipt", {})
    ing = raw.get("ingredients", {})
    lex = raw.get("lexicon", {})
    log = raw.get("logging", {})

    # Resolve log level: config file → environment variable → default
    level = log.get("level", "") or os.environ.get(LOG_LEVEL_ENV, "") or "WARNING"

    config = MatchingConfig(
        matching=ScoringConfig(
            min_score=float(mat.get("min_score", MIN_THRESHOLD)),
            high_confidence=float(
                mat.get("high_confidence", HIGH_CONFIDENCE_THRESHOLD)
            ),
        ),
        receipt=ReceiptConfig(
            min_price=float(rcp.get("min_price", DEFAULT_MIN_PRICE)),
            max_price=float(rcp.get("max_price", DEFAULT_MAX_PRICE)),
            min_name_length=rcp.get("min_name_length", DEFAULT_MIN_NAME_LENGTH),
            header_lines=rcp.get("header_lines", DEFAULT_HEADER_LINES),
            max_text_length=rcp.get("max_text_length", DEFAULT_MAX_TEXT_LENGTH),
        ),
        ingredients=IngredientConfig(
            similarity_threshold=float(
                ing.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD)
            ),
        ),
        lexicon=LexiconConfig(
            abbreviations=dict(lex.get("abbreviations", {})),
            synonyms=dict(lex.get("synonyms", {})),
            extra_descriptors=list(lex.get("extra_descriptors", [])),
        ),
        logging=LoggingConfig(level=str(level).upper()),
    )
    config.validate()
    return config
