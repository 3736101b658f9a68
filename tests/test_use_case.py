# tests/test_use_case.py
import pytest

from talord.core.domain.exceptions import (
    BatchTooLargeError,
    InvalidNumberError,
    NumberOutOfRangeError,
)
from talord.core.domain.models import NumberKind
from talord.core.use_cases.name_number import NameNumber


def test_execute_integer(use_case):
    result = use_case.execute(21)
    assert result.text == "enogtyve"
    assert result.kind is NumberKind.INTEGER
    assert result.number == 21
    assert result.lang_code == "da"


def test_execute_float(use_case):
    result = use_case.execute(3.14)
    assert result.text == "tre komma en, fire"
    assert result.kind is NumberKind.FLOAT


def test_execute_text_parses_first(use_case):
    assert use_case.execute_text(" -42 ").text == "minus toogfyrre"
    assert use_case.execute_text("1_000_001").text == "en million og én"


def test_execute_text_rejects_garbage(use_case):
    with pytest.raises(InvalidNumberError):
        use_case.execute_text("fyrre")


def test_execute_rejects_nan(use_case):
    with pytest.raises(InvalidNumberError):
        use_case.execute(float("nan"))


def test_execute_out_of_range(use_case):
    with pytest.raises(NumberOutOfRangeError):
        use_case.execute(10**40)


def test_batch_preserves_order(use_case):
    results = use_case.execute_batch([1, 2.5, 1000])
    assert [r.text for r in results] == ["et", "to komma fem", "et tusind"]


def test_batch_limit(use_case):
    with pytest.raises(BatchTooLargeError):
        use_case.execute_batch(list(range(6)))


def test_explicit_zero_batch_limit_is_kept(lexicon):
    use_case = NameNumber(lexicon=lexicon, max_batch_size=0)
    assert use_case.max_batch_size == 0
    with pytest.raises(BatchTooLargeError):
        use_case.execute_batch([1])


def test_execute_rejects_booleans(use_case):
    with pytest.raises(TypeError):
        use_case.execute(True)
