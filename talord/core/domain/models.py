# talord/core/domain/models.py
from __future__ import annotations

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

Number = Union[int, float]

# JSON booleans and numeric strings are not numbers.
StrictNumber = Union[StrictInt, StrictFloat]


class NumberKind(str, Enum):
    """Which branch of the namer produced the text."""
    INTEGER = "int"
    FLOAT = "float"


class NumeralName(BaseModel):
    """The output: a number and its written-out name."""
    number: Number
    text: str
    kind: NumberKind
    lang_code: str = "da"


# --- API Payloads ---

class NumeralRequest(BaseModel):
    """Input payload for naming one number."""
    number: StrictNumber = Field(..., description="Integer or decimal number to name")


class NumeralBatchRequest(BaseModel):
    """Input payload for naming several numbers in one call."""
    numbers: List[StrictNumber] = Field(..., min_length=1)


class NumeralBatchResponse(BaseModel):
    results: List[NumeralName]
