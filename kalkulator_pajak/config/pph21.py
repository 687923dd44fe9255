"""
PPh 21 calculation module for permanent employees (Pegawai Tetap).

Two schemes are supported:
  * Gross    - the employee bears the tax, withheld from gross pay.
  * Gross Up - the employer bears the tax and adds it on top of net pay.

IMPORTANT: Both schemes use a flat rate on gross income. PTKP and PKP are
           reported for information only and do not change the tax amount.
"""

from typing import Any, Dict, Tuple

from kalkulator_pajak.config.config import (
    DEFAULTS,
    get_tax_status,
    lookup_ptkp,
)
from kalkulator_pajak.helpers import get_logger
from kalkulator_pajak.utils import round_half_up

logger = get_logger(__name__)

PPH21_RATE = DEFAULTS["PPH21_RATE"]
GROSS_UP_DPP = DEFAULTS["GROSS_UP_DPP"]


def calculate_pkp(annual_gross: float, ptkp: float) -> float:
    """PKP tahunan = penghasilan bruto setahun - PTKP, tidak pernah negatif."""
    return max(annual_gross - ptkp, 0.0)


def calculate_pph21(gross_income: float,
                    is_married: bool,
                    dependents: int) -> Tuple[float, float, float, float]:
    """
    Calculate monthly and annual PPh 21 using the Gross scheme.

    Args:
        gross_income: Monthly gross income (>= 0)
        is_married: Marital status
        dependents: Number of dependents, already clamped to 0-3

    Returns:
        Tuple of (annual_tax, monthly_tax, ptkp, pkp)
    """
    monthly_gross = float(gross_income)
    annual_gross = monthly_gross * 12

    tax_status = get_tax_status(is_married, dependents)
    ptkp = lookup_ptkp(tax_status)
    pkp = calculate_pkp(annual_gross, ptkp)

    annual_tax = float(round_half_up(annual_gross * PPH21_RATE / 100))
    monthly_tax = float(round_half_up(monthly_gross * PPH21_RATE / 100))

    logger.debug(
        f"PPh21 gross {tax_status}: bruto={monthly_gross} ptkp={ptkp} pkp={pkp} "
        f"monthly={monthly_tax} annual={annual_tax}"
    )
    return annual_tax, monthly_tax, ptkp, pkp


def calculate_pph21_gross_up(net_salary: float,
                             is_married: bool,
                             dependents: int) -> Dict[str, Any]:
    """
    Calculate PPh 21 using the Gross Up scheme.

    The tax base (DPP) is the fixed amount GROSS_UP_DPP whatever net salary
    is requested; the resulting tax is added on top of the net salary.

    Args:
        net_salary: Desired monthly take home pay (>= 0)
        is_married: Marital status
        dependents: Number of dependents, already clamped to 0-3

    Returns:
        Dictionary with net/gross salary, DPP, rate, taxes, PTKP and PKP
    """
    net_salary = float(net_salary)

    monthly_tax = float(round_half_up(GROSS_UP_DPP * PPH21_RATE / 100))
    gross_salary = net_salary + monthly_tax
    annual_tax = float(round_half_up(monthly_tax * 12))

    tax_status = get_tax_status(is_married, dependents)
    ptkp = lookup_ptkp(tax_status)
    pkp = calculate_pkp(gross_salary * 12, ptkp)

    result = {
        "net_salary": net_salary,
        "gross_salary": gross_salary,
        "dpp": GROSS_UP_DPP,
        "rate": PPH21_RATE,
        "monthly_tax": monthly_tax,
        "annual_tax": annual_tax,
        "tax_status": tax_status,
        "ptkp": ptkp,
        "pkp": pkp,
    }

    logger.debug(f"PPh21 gross up: {result}")
    return result
