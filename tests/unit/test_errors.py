"""Tests for the error taxonomy."""

import pytest

from hyperint.core import (
    ERROR_MESSAGES,
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    ArrayIndexError,
    ComputationLimitError,
    DataStructureError,
    DivisionByZeroError,
    HeapPropertyError,
    HyperintError,
    PrecisionError,
    TreeError,
    ValidationError,
    is_hyperint_error,
    wrap_error,
)


@pytest.mark.parametrize(
    "error_type, builtin",
    [
        (ValidationError, ValueError),
        (ArithmeticOverflowError, OverflowError),
        (ArithmeticUnderflowError, ArithmeticError),
        (DivisionByZeroError, ZeroDivisionError),
        (PrecisionError, ValueError),
        (ComputationLimitError, RuntimeError),
        (ArrayIndexError, IndexError),
    ],
)
def test_errors_extend_builtins(error_type, builtin):
    error = error_type("boom")
    assert isinstance(error, HyperintError)
    assert isinstance(error, builtin)


def test_data_structure_errors():
    for error_type in (ArrayIndexError, HeapPropertyError, TreeError):
        assert issubclass(error_type, DataStructureError)


@pytest.mark.parametrize(
    "error_type, key",
    [
        (ArithmeticOverflowError, "OVERFLOW"),
        (ArithmeticUnderflowError, "UNDERFLOW"),
        (DivisionByZeroError, "DIVISION_BY_ZERO"),
        (PrecisionError, "INVALID_PRECISION"),
        (ComputationLimitError, "COMPUTATION_LIMIT"),
        (ArrayIndexError, "INDEX_OUT_OF_RANGE"),
        (HeapPropertyError, "INVALID_HEAP_PROPERTY"),
        (TreeError, "TREE_EMPTY"),
    ],
)
def test_default_messages(error_type, key):
    assert str(error_type()) == ERROR_MESSAGES[key]


def test_is_hyperint_error():
    assert is_hyperint_error(TreeError())
    assert not is_hyperint_error(ValueError("x"))


def test_wrap_error_passes_hyperint_errors_through():
    error = ComputationLimitError()
    assert wrap_error(error) is error


def test_wrap_error_chains_foreign_errors():
    original = KeyError("missing")
    wrapped = wrap_error(original)
    assert type(wrapped) is HyperintError
    assert wrapped.__cause__ is original
    assert "missing" in str(wrapped)


def test_wrap_error_without_message():
    wrapped = wrap_error(RuntimeError())
    assert str(wrapped) == "RuntimeError"
