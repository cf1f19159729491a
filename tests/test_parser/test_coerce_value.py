from datetime import datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from pino_argparse.parser.utils import coerce_bool, coerce_enum, coerce_value


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Priority(Enum):
    LOW = 1
    HIGH = 2


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("hello", str, "hello"),
        ("", str, ""),
        ("True", bool, True),
        ("off", bool, False),
        ("a/b", Path, Path("a/b")),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("abc", Union[int, str], "abc"),
    ],
)
def test_coerce_value_union(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_literal():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_coerce_enum_by_name_or_value():
    assert coerce_enum("RED", Color) is Color.RED
    assert coerce_enum("green", Color) is Color.GREEN
    assert coerce_value("2", Priority) is Priority.HIGH
    with pytest.raises(ValueError):
        coerce_value("yellow", Color)


def test_coerce_bool_rejects_unknown_words():
    assert coerce_bool(" YES ") is True
    with pytest.raises(ValueError):
        coerce_bool("maybe")


def test_coerce_datetime():
    assert coerce_value("2025-01-02", datetime) == datetime(2025, 1, 2)
    with pytest.raises(ValueError):
        coerce_value("not a date", datetime)


def test_coerce_value_with_callable():
    assert coerce_value("a,b", lambda value: value.split(",")) == ["a", "b"]


def test_coerce_value_invalid_int():
    with pytest.raises(ValueError):
        coerce_value("abc", int)


def test_coerce_value_decimal():
    assert coerce_value("1.50", Decimal) == Decimal("1.50")
    with pytest.raises(ValueError):
        coerce_value("abc", Decimal)


def test_coerce_value_wraps_any_converter_error():
    def strict_ratio(value: str) -> float:
        raise ArithmeticError(f"bad ratio {value}")

    with pytest.raises(ValueError) as excinfo:
        coerce_value("1/0", strict_ratio)
    assert isinstance(excinfo.value.__cause__, ArithmeticError)


def test_coerce_value_union_skips_any_converter_error():
    assert coerce_value("abc", Decimal | str) == "abc"


def test_coerce_value_non_string_literal():
    assert coerce_value("1", Literal[1, 2]) == 1
    assert coerce_value("b", Literal["a", "b", 3]) == "b"
    with pytest.raises(ValueError):
        coerce_value("3", Literal[1, 2])
