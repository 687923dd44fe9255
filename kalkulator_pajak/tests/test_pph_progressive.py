import pytest

from kalkulator_pajak.config.pph_progressive import (
    DEFAULT_TAX_BRACKETS,
    TaxBracket,
    calculate_income_tax,
    validate_tax_brackets,
)


@pytest.mark.parametrize("income", [0, -1, -50_000_000])
def test_non_positive_income_has_no_tax(income):
    assert calculate_income_tax(income) == 0


@pytest.mark.parametrize(
    "income,expected",
    [
        (10_000_000, 500_000),
        (50_000_000, 2_500_000),
        (100_000_000, 10_000_000),
        (250_000_000, 32_500_000),
        (500_000_000, 95_000_000),
        (600_000_000, 125_000_000),
    ],
)
def test_calculate_income_tax_default_brackets(income, expected):
    assert calculate_income_tax(income) == pytest.approx(expected)


def test_boundary_income_does_not_enter_next_bracket():
    brackets = [
        TaxBracket(0, 100, 0.10),
        TaxBracket(100, float("inf"), 0.50),
    ]
    assert calculate_income_tax(100, brackets) == pytest.approx(10)
    assert calculate_income_tax(101, brackets) == pytest.approx(10.5)


def test_result_is_not_rounded():
    assert calculate_income_tax(11, DEFAULT_TAX_BRACKETS) == pytest.approx(0.55)


def test_default_brackets_are_valid():
    assert validate_tax_brackets(DEFAULT_TAX_BRACKETS) == []


def test_validate_tax_brackets_reports_problems():
    brackets = [
        TaxBracket(10, 100, 0.1),
        TaxBracket(120, 200, 1.5),
        TaxBracket(150, 140, 0.2),
    ]
    errors = validate_tax_brackets(brackets)

    assert "first bracket starts at 10, expected 0" in errors
    assert "gap between bracket 1 and bracket 2" in errors
    assert "bracket 2 rate 1.5 is outside 0..1" in errors
    assert "bracket 3 overlaps bracket 2" in errors
    assert "bracket 3 upper bound is not above its lower bound" in errors
    assert "last bracket must be unbounded" in errors


def test_validate_empty_brackets():
    assert validate_tax_brackets([]) == ["tax brackets must not be empty"]
