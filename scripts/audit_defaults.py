from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from kalkulator_pajak.config import (  # noqa: E402
    DEFAULT_TAX_BRACKETS,
    DEFAULTS,
    PTKP_TABLE,
    validate_ptkp_table,
    validate_tax_brackets,
)


def main() -> None:
    """Audit the built-in PTKP and tax bracket tables and print results."""
    print(f"Auditing tax tables for {DEFAULTS['TAX_YEAR']}")
    errors = validate_ptkp_table(PTKP_TABLE) + [
        f"tax_brackets: {err}" for err in validate_tax_brackets(DEFAULT_TAX_BRACKETS)
    ]

    if errors:
        print("\n--- AUDIT FAILED ---")
        for err in errors:
            print(f"❌ {err}")
        sys.exit(1)

    print("\nAll checks passed for tax tables! ✅")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Audit the built-in PTKP and tax bracket tables")
    parser.parse_args()
    main()
