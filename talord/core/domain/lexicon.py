"""
talord/core/domain/lexicon.py

The numeral lexicon: every word the namer is allowed to emit.

All language-specific strings come from a JSON configuration card
(talord/data/da.json by default). The card is validated once into a frozen
`NumeralLexicon` and cached for the lifetime of the process, so concurrent
callers share it without any locking.

Card layout:

    {
      "meta":    {"language": "da", ...},
      "numbers": {"units": [10], "teens": [10], "tens": [8], "magnitudes": [...]},
      "words":   {"hundred", "conjunction", "plural_suffix", "minus",
                  "decimal_separator"},
      "one":     {"plain", "neuter", "emphasized"}
    }

The three forms of "one" are separate card entries. They are never derived
from each other, so each agreement rule can be audited on its own:

- plain      "en"  common gender, used before million, milliard, ...
- neuter     "et"  bare quantities and before hundrede / tusind
- emphasized "én"  a final "one", kept apart from the article "en"
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from talord.core.domain.exceptions import LexiconError
from talord.shared.config import settings

logger = structlog.get_logger()

DEFAULT_CARD_PATH = Path(__file__).resolve().parents[2] / "data" / "da.json"

Word = Annotated[str, Field(min_length=1)]


class NumeralLexicon(BaseModel):
    """Immutable word tables for one language."""

    model_config = ConfigDict(frozen=True)

    language: Word
    units: Tuple[Word, ...] = Field(..., min_length=10, max_length=10)
    teens: Tuple[Word, ...] = Field(..., min_length=10, max_length=10)
    # 20, 30, ..., 90 indexed by tens digit minus 2
    tens: Tuple[Word, ...] = Field(..., min_length=8, max_length=8)
    # thousand, million, ... indexed by digit group position minus 1
    magnitudes: Tuple[Word, ...] = Field(..., min_length=1)

    hundred: Word
    conjunction: Word
    plural_suffix: Word
    minus: Word
    decimal_separator: Word

    plain_one: Word
    neuter_one: Word
    emphasized_one: Word

    @model_validator(mode="after")
    def _check_forms_of_one(self) -> "NumeralLexicon":
        forms = {self.plain_one, self.neuter_one, self.emphasized_one}
        if len(forms) != 3:
            raise ValueError("plain, neuter and emphasized 'one' must be distinct words")
        return self

    @property
    def max_value(self) -> int:
        """Smallest integer magnitude that the ladder can no longer name."""
        return 1000 ** (len(self.magnitudes) + 1)

    @classmethod
    def from_card(cls, card: Dict[str, Any]) -> "NumeralLexicon":
        """
        Build a lexicon from a parsed JSON card.

        Raises pydantic.ValidationError when keys are missing or tables have
        the wrong length.
        """
        meta = card.get("meta", {}) or {}
        numbers = card.get("numbers", {}) or {}
        words = card.get("words", {}) or {}
        one = card.get("one", {}) or {}

        return cls(
            language=meta.get("language"),
            units=numbers.get("units"),
            teens=numbers.get("teens"),
            tens=numbers.get("tens"),
            magnitudes=numbers.get("magnitudes"),
            hundred=words.get("hundred"),
            conjunction=words.get("conjunction"),
            plural_suffix=words.get("plural_suffix"),
            minus=words.get("minus"),
            decimal_separator=words.get("decimal_separator"),
            plain_one=one.get("plain"),
            neuter_one=one.get("neuter"),
            emphasized_one=one.get("emphasized"),
        )


def _resolve_card_path(path: Optional[str]) -> Path:
    """
    Priority:
    1. explicit path argument
    2. settings.LEXICON_PATH (TALORD_LEXICON_PATH)
    3. the bundled Danish card
    """
    if path:
        return Path(path)
    if settings.LEXICON_PATH:
        return Path(settings.LEXICON_PATH)
    return DEFAULT_CARD_PATH


@lru_cache(maxsize=None)
def load_lexicon(path: Optional[str] = None) -> NumeralLexicon:
    """
    Load and validate a lexicon card. Results are cached per path.
    """
    card_path = _resolve_card_path(path)

    if not card_path.exists():
        logger.error("lexicon_card_missing", path=str(card_path))
        raise LexiconError(f"Lexicon card not found: {card_path}")

    try:
        with open(card_path, "r", encoding="utf-8") as f:
            card = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("lexicon_card_unreadable", path=str(card_path), error=str(e))
        raise LexiconError(f"Lexicon card is not valid JSON: {card_path}") from e

    if not isinstance(card, dict):
        raise LexiconError(f"Lexicon card must hold a JSON object: {card_path}")

    try:
        lexicon = NumeralLexicon.from_card(card)
    except ValidationError as e:
        logger.error("lexicon_card_invalid", path=str(card_path), errors=e.error_count())
        raise LexiconError(f"Lexicon card failed validation: {card_path}\n{e}") from e

    logger.info(
        "lexicon_loaded",
        lang=lexicon.language,
        path=str(card_path),
        magnitudes=len(lexicon.magnitudes),
    )
    return lexicon
