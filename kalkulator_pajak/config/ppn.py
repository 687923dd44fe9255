from kalkulator_pajak.config.config import DEFAULTS
from kalkulator_pajak.helpers import get_logger

logger = get_logger(__name__)

DEFAULT_VAT_RATE = DEFAULTS["VAT_RATE"]


def calculate_vat(amount: float, rate_percent: float = DEFAULT_VAT_RATE) -> float:
    """PPN = harga x tarif / 100."""
    vat = amount * rate_percent / 100
    logger.debug(f"PPN {rate_percent}% of {amount}: {vat}")
    return vat
