# talord/core/use_cases/name_number.py
import math
from typing import List, Optional, Sequence, Union

import structlog

from talord.core.domain.exceptions import BatchTooLargeError, InvalidNumberError
from talord.core.domain.lexicon import NumeralLexicon, load_lexicon
from talord.core.domain.models import NumberKind, NumeralName
from talord.core.numerals.namer import name
from talord.core.parsing import parse_number
from talord.shared.config import settings

logger = structlog.get_logger()


class NameNumber:
    """
    Use Case: Converts a number (or its raw text) into its Danish name.

    Responsibilities:
    1. Parses raw text from the surfaces into int / float.
    2. Delegates to the pure namer with the shared lexicon.
    3. Logs the outcome.
    4. Enforces the batch size limit.
    """

    def __init__(
        self,
        lexicon: Optional[NumeralLexicon] = None,
        max_batch_size: Optional[int] = None,
    ):
        self.lexicon = lexicon or load_lexicon()
        self.max_batch_size = (
            settings.MAX_BATCH_SIZE if max_batch_size is None else max_batch_size
        )

    def execute(self, number: Union[int, float]) -> NumeralName:
        """
        Name a parsed number.

        Raises:
            InvalidNumberError: nan / inf.
            NumberOutOfRangeError: magnitude past the ladder.
        """
        kind = NumberKind.FLOAT if isinstance(number, float) else NumberKind.INTEGER
        logger.debug("naming_started", kind=kind.value)

        if kind is NumberKind.FLOAT and not math.isfinite(number):
            raise InvalidNumberError(f"Cannot name a non-finite number: {number!r}")

        text = name(number, self.lexicon)

        logger.info("naming_success", number=repr(number), kind=kind.value, text_preview=text[:50])
        return NumeralName(
            number=number,
            text=text,
            kind=kind,
            lang_code=self.lexicon.language,
        )

    def execute_text(self, raw: str) -> NumeralName:
        """Parse raw text, then name it."""
        try:
            number = parse_number(raw)
        except InvalidNumberError:
            logger.info("naming_rejected", raw=(raw or "")[:50])
            raise
        return self.execute(number)

    def execute_batch(self, numbers: Sequence[Union[int, float]]) -> List[NumeralName]:
        if len(numbers) > self.max_batch_size:
            raise BatchTooLargeError(
                f"Batch holds {len(numbers)} numbers; the limit is {self.max_batch_size}."
            )
        return [self.execute(number) for number in numbers]
