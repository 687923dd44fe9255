import math
import os
from types import MappingProxyType

from kalkulator_pajak.exceptions import ValidationError
from kalkulator_pajak.helpers import get_logger

# Define all defaults in one place for better maintenance
DEFAULTS = {
    "ENV_PREFIX": "KALKULATOR_PAJAK_",
    "TAX_YEAR": 2023,
    "PPH21_RATE": 0.75,          # percent of gross income
    "GROSS_UP_DPP": 6_045_340.0,  # rupiah, fixed gross-up base
    "VAT_RATE": 11.0,            # percent
    "MAX_DEPENDENTS": 3,
    "LOG_LEVEL": "WARNING",
}

# PTKP (Penghasilan Tidak Kena Pajak) 2023, rupiah per year
PTKP_TABLE = MappingProxyType({
    "TK/0": 54_000_000.0,  # belum kawin, tanpa tanggungan
    "K/0": 58_500_000.0,   # kawin, tanpa tanggungan
    "K/1": 63_000_000.0,
    "K/2": 67_500_000.0,
    "K/3": 72_000_000.0,   # kawin, 3 tanggungan atau lebih
})

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = get_logger("kalkulator_pajak.config")


def get_value(fieldname: str, default=None):
    """
    Helper to fetch a setting from the environment.
    ``vat_rate`` is read from ``KALKULATOR_PAJAK_VAT_RATE``.
    """
    return os.environ.get(f"{DEFAULTS['ENV_PREFIX']}{fieldname.upper()}", default)


def get_numeric(fieldname: str, default_key: str = None) -> float:
    """
    Helper to fetch a numeric setting with proper fallback and logging.

    Args:
        fieldname: The setting name, without the environment prefix
        default_key: The key in DEFAULTS dictionary to use if setting is not found

    Returns:
        float: The numeric value from the environment or default
    """
    value = get_value(fieldname)
    default = DEFAULTS.get(default_key) if default_key else None

    if value is None or value.strip() == "":
        if default is None:
            raise ValidationError(f"Setting '{fieldname}' is not set and has no default.")
        logger.info(f"Setting '{fieldname}' not set. Using default: {default}")
        return float(default)

    try:
        return float(value)
    except ValueError:
        if default is None:
            raise ValidationError(f"Setting '{fieldname}' is not a number: {value!r}")
        logger.warning(f"Setting '{fieldname}' is not a number ({value!r}). Using default: {default}")
        return float(default)


def get_vat_rate() -> float:
    """
    Tarif PPN default (%).
    Bisa diganti lewat environment variable KALKULATOR_PAJAK_VAT_RATE.
    """
    rate = get_numeric("vat_rate", "VAT_RATE")
    if not math.isfinite(rate) or rate < 0:
        logger.warning(f"VAT rate {rate} is not a usable percentage. Using default: {DEFAULTS['VAT_RATE']}")
        return float(DEFAULTS["VAT_RATE"])
    return rate


def get_log_level() -> str:
    """Level log dari KALKULATOR_PAJAK_LOG_LEVEL, fallback ke DEFAULTS."""
    level = (get_value("log_level") or "").strip().upper()
    if level in LOG_LEVELS:
        return level
    if level:
        logger.warning(f"Unknown log level {level!r}. Using default: {DEFAULTS['LOG_LEVEL']}")
    return DEFAULTS["LOG_LEVEL"]


def get_tax_status(is_married: bool, dependents: int) -> str:
    """
    Build the PTKP status code, e.g. ``TK/0`` or ``K/2``.
    Callers clamp ``dependents`` to MAX_DEPENDENTS.
    """
    return f"{'K' if is_married else 'TK'}/{dependents}"


def lookup_ptkp(tax_status: str) -> float:
    """
    Return the annual PTKP amount for the given tax_status.
    Unknown status codes yield 0.0.
    """
    if not tax_status:
        logger.warning("PTKP lookup: tax_status is empty.")
        return 0.0

    ptkp = PTKP_TABLE.get(tax_status)
    if ptkp is None:
        logger.warning(f"PTKP Table: tax_status '{tax_status}' not found.")
        return 0.0

    return ptkp


def validate_ptkp_table(ptkp) -> list:
    """Return a list of validation errors for a PTKP table."""
    errors = []

    expected = [get_tax_status(False, 0)] + [
        get_tax_status(True, n) for n in range(DEFAULTS["MAX_DEPENDENTS"] + 1)
    ]
    for code in expected:
        if code not in ptkp:
            errors.append(f"ptkp missing status {code}")

    for code, value in ptkp.items():
        if not isinstance(value, (int, float)):
            errors.append(f"ptkp value for {code} is not a number")
        elif value <= 0:
            errors.append(f"ptkp value for {code} must be positive")

    married = [ptkp[code] for code in expected[1:] if code in ptkp]
    if married != sorted(married):
        errors.append("ptkp for K/n must not decrease as dependents increase")

    return errors
