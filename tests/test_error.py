"""Tests for the error hierarchy and its code tables."""

import pytest

from calculator import error as E


@pytest.mark.parametrize("error_class, base, code", [
    (E.EmptyExpression, E.ParseError, "3000"),
    (E.InvalidCharacter, E.ParseError, "3001"),
    (E.InvalidNumber, E.ParseError, "3002"),
    (E.InvalidExpression, E.ParseError, "3005"),
    (E.InvalidExpressionFormat, E.ParseError, "3006"),
    (E.DivisionByZero, E.CalculationError, "3003"),
    (E.UnknownOperator, E.CalculationError, "3004"),
    (E.NumberTooBig, E.CalculationError, "3026"),
    (E.ConfigurationError, E.MathError, "5000"),
])
def test_default_codes_and_categories(error_class, base, code):
    error = error_class("detail")
    assert isinstance(error, base)
    assert isinstance(error, E.MathError)
    assert error.code == code
    assert error.message == "detail"
    assert error.equation is None
    assert code in E.ERROR_MESSAGES


def test_default_messages():
    assert E.EmptyExpression().message == E.ERROR_MESSAGES["3000"]
    assert E.DivisionByZero().message == E.ERROR_MESSAGES["3003"]
    assert str(E.InvalidExpressionFormat()) == E.ERROR_MESSAGES["3006"]


def test_equation_is_kept():
    error = E.DivisionByZero(equation="1÷0")
    assert error.equation == "1÷0"


def test_describe_known_code():
    assert E.describe("3003") == ("Calculator Error", "Division by Zero")
    assert E.describe("5000")[0] == "Configuration Error"


def test_describe_unknown_code_falls_back():
    assert E.describe("1234") == ("Unexpected Error", E.ERROR_MESSAGES["9999"])
