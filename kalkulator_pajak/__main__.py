import sys

from kalkulator_pajak.cli import main

if __name__ == "__main__":
    sys.exit(main())
