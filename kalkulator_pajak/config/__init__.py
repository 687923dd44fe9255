from .config import (
    DEFAULTS,
    PTKP_TABLE,
    get_log_level,
    get_numeric,
    get_tax_status,
    get_value,
    get_vat_rate,
    lookup_ptkp,
    validate_ptkp_table,
)
from .pph21 import calculate_pph21, calculate_pph21_gross_up
from .pph_progressive import (
    DEFAULT_TAX_BRACKETS,
    TaxBracket,
    calculate_income_tax,
    validate_tax_brackets,
)
from .ppn import DEFAULT_VAT_RATE, calculate_vat

__all__ = [
    "DEFAULTS",
    "PTKP_TABLE",
    "get_value",
    "get_numeric",
    "get_vat_rate",
    "get_log_level",
    "get_tax_status",
    "lookup_ptkp",
    "validate_ptkp_table",
    "calculate_pph21",
    "calculate_pph21_gross_up",
    "TaxBracket",
    "DEFAULT_TAX_BRACKETS",
    "calculate_income_tax",
    "validate_tax_brackets",
    "DEFAULT_VAT_RATE",
    "calculate_vat",
]
