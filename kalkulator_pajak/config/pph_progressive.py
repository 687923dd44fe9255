from typing import List, NamedTuple, Sequence

from kalkulator_pajak.helpers import get_logger

logger = get_logger(__name__)


class TaxBracket(NamedTuple):
    lower_bound: float
    upper_bound: float
    rate: float  # fraction, 0.05 = 5%


# Tarif progresif Pajak Penghasilan umum 2023
DEFAULT_TAX_BRACKETS = (
    TaxBracket(0.0, 50_000_000.0, 0.05),
    TaxBracket(50_000_000.0, 250_000_000.0, 0.15),
    TaxBracket(250_000_000.0, 500_000_000.0, 0.25),
    TaxBracket(500_000_000.0, float("inf"), 0.30),
)


def calculate_income_tax(income: float,
                         brackets: Sequence[TaxBracket] = DEFAULT_TAX_BRACKETS) -> float:
    """
    Hitung pajak penghasilan dengan metode progresif (lapisan).

    Brackets must be ordered ascending by lower bound. A bracket only
    applies when income is strictly above its lower bound; the result is
    not rounded.
    """
    pajak = 0.0

    for bracket in brackets:
        if income <= bracket.lower_bound:
            break
        lapisan = min(income, bracket.upper_bound) - bracket.lower_bound
        pajak += lapisan * bracket.rate

    logger.debug(f"Progressive tax for {income}: {pajak}")
    return pajak


def validate_tax_brackets(brackets: Sequence[TaxBracket]) -> List[str]:
    """Return a list of validation errors for a bracket table."""
    errors: List[str] = []

    if not brackets:
        return ["tax brackets must not be empty"]

    if brackets[0].lower_bound != 0:
        errors.append(f"first bracket starts at {brackets[0].lower_bound}, expected 0")

    previous = None
    for i, bracket in enumerate(brackets, 1):
        if bracket.upper_bound <= bracket.lower_bound:
            errors.append(f"bracket {i} upper bound is not above its lower bound")
        if not 0 <= bracket.rate <= 1:
            errors.append(f"bracket {i} rate {bracket.rate} is outside 0..1")
        if previous is not None:
            if bracket.lower_bound > previous.upper_bound:
                errors.append(f"gap between bracket {i - 1} and bracket {i}")
            elif bracket.lower_bound < previous.upper_bound:
                errors.append(f"bracket {i} overlaps bracket {i - 1}")
        previous = bracket

    if brackets[-1].upper_bound != float("inf"):
        errors.append("last bracket must be unbounded")

    return errors
