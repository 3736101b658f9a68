from fastapi import APIRouter, Depends, HTTPException, status

from talord.adapters.api.dependencies import get_name_number_use_case
from talord.core.domain.exceptions import (
    BatchTooLargeError,
    InvalidNumberError,
    NumberOutOfRangeError,
)
from talord.core.domain.models import (
    NumeralBatchRequest,
    NumeralBatchResponse,
    NumeralName,
    NumeralRequest,
)
from talord.core.use_cases.name_number import NameNumber

router = APIRouter(prefix="/numerals", tags=["Numerals"])

# Errors caused by the caller's input, reported as 422
_INPUT_ERRORS = (InvalidNumberError, NumberOutOfRangeError, BatchTooLargeError)


def _unprocessable(e: Exception) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


@router.post(
    "/batch",
    response_model=NumeralBatchResponse,
    status_code=status.HTTP_200_OK,
    summary="Name several numbers",
)
async def name_batch(
    payload: NumeralBatchRequest,
    use_case: NameNumber = Depends(get_name_number_use_case),
):
    try:
        results = use_case.execute_batch(payload.numbers)
    except _INPUT_ERRORS as e:
        raise _unprocessable(e)
    return NumeralBatchResponse(results=results)


@router.post(
    "",
    response_model=NumeralName,
    status_code=status.HTTP_200_OK,
    summary="Name a number given in a JSON body",
)
async def name_number(
    payload: NumeralRequest,
    use_case: NameNumber = Depends(get_name_number_use_case),
):
    try:
        return use_case.execute(payload.number)
    except _INPUT_ERRORS as e:
        raise _unprocessable(e)


@router.get(
    "/{raw}",
    response_model=NumeralName,
    status_code=status.HTTP_200_OK,
    summary="Name a number given as text",
)
async def name_text(
    raw: str,
    use_case: NameNumber = Depends(get_name_number_use_case),
):
    """
    Parses `raw` the same way the CLI does ("42", "-3.5", "1e3", "1_000")
    and returns its Danish name.
    """
    try:
        return use_case.execute_text(raw)
    except _INPUT_ERRORS as e:
        raise _unprocessable(e)
