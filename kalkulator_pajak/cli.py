"""
Interactive console for Kalkulator Pajak.

Reads one answer per line, runs the calculators from
``kalkulator_pajak.config`` and prints the breakdown in Indonesian.
Invalid amounts are reported to the user and never end the menu loop.
"""

from __future__ import annotations

import argparse
import math
from typing import Callable, List, Optional, Sequence, Tuple

from kalkulator_pajak import __version__
from kalkulator_pajak.config import (
    DEFAULTS,
    calculate_income_tax,
    calculate_pph21,
    calculate_pph21_gross_up,
    calculate_vat,
    get_log_level,
    get_tax_status,
    get_vat_rate,
)
from kalkulator_pajak.config.config import LOG_LEVELS
from kalkulator_pajak.exceptions import ValidationError
from kalkulator_pajak.helpers import get_logger, set_log_level
from kalkulator_pajak.utils import format_number

logger = get_logger(__name__)

MENU = [
    "",
    "Pilih jenis perhitungan:",
    "1. Hitung PPh 21 (Pegawai Tetap) - Gross",
    "2. Hitung PPh 21 (Pegawai Tetap) - Gross Up",
    "3. Hitung Pajak Penghasilan Umum",
    "4. Hitung PPN (Pajak Pertambahan Nilai)",
    "5. Keluar",
]
MSG_INVALID_AMOUNT = "Masukan tidak valid. Harap masukkan angka positif."
MSG_INVALID_CHOICE = "Pilihan tidak valid. Silakan pilih 1, 2, 3, 4, atau 5."
MSG_GOODBYE = "\nTerima kasih telah menggunakan kalkulator pajak!"


def parse_amount(raw: str) -> float:
    """Parse a rupiah amount; empty, non-numeric, non-finite or negative input is rejected."""
    text = (raw or "").strip()
    try:
        amount = float(text)
    except ValueError:
        raise ValidationError(f"Not a number: {text!r}")

    if not math.isfinite(amount) or amount < 0:
        raise ValidationError(f"Amount must be a non-negative number: {text!r}")
    return amount


def parse_marital_status(raw: str) -> bool:
    """'2' means Kawin, anything else Belum Kawin."""
    return (raw or "").strip() == "2"


def parse_dependents(raw: str) -> int:
    """Parse dependents count, defaulting to 0 and clamping to MAX_DEPENDENTS."""
    try:
        dependents = int((raw or "").strip())
    except ValueError:
        logger.info(f"Dependents {raw!r} is not a number, using 0")
        return 0
    return min(max(dependents, 0), DEFAULTS["MAX_DEPENDENTS"])


def parse_rate(raw: str, default: float) -> float:
    """Parse a percentage, falling back to ``default`` when unusable."""
    text = (raw or "").strip()
    if not text:
        return default
    try:
        rate = parse_amount(text)
    except ValidationError as e:
        logger.warning(f"{e}. Using default rate {default}%")
        return default
    return rate


def rp(value: float) -> str:
    return f"Rp{format_number(value):>15}"


def status_label(is_married: bool) -> str:
    return "Kawin" if is_married else "Belum Kawin"


def format_pph21_report(amount: float,
                        is_married: bool,
                        dependents: int,
                        annual_tax: float,
                        monthly_tax: float,
                        ptkp: float,
                        pkp: float) -> List[str]:
    annual_gross = amount * 12
    tax_status = get_tax_status(is_married, dependents)

    lines = [
        "",
        "=== HASIL PERHITUNGAN PPh 21 ===",
        f"Penghasilan Bruto per bulan: {rp(amount)}",
        f"Penghasilan Bruto setahun:  {rp(annual_gross)}",
        "",
        f"Status: {status_label(is_married)}",
    ]
    if is_married:
        lines.append(f"Jumlah Tanggungan: {dependents}")

    lines += [
        "",
        "[Penghasilan Tidak Kena Pajak (PTKP)]",
        f"Status {tax_status:<5}: {rp(ptkp)} per tahun",
        "",
        "[Penghasilan Kena Pajak (PKP)]",
        f"Gaji Setahun - PTKP: {rp(annual_gross)} - {rp(ptkp)} = {rp(pkp)}",
        "",
        "[Perhitungan PPh 21 (0.75% x Gaji Bruto)]",
        f"Per Bulan: 0.75% x {rp(amount)} = {rp(monthly_tax)}",
        f"Per Tahun: 0.75% x {rp(annual_gross)} = {rp(annual_tax)}",
        "",
        "[Ringkasan]",
        f"Gaji Bruto Setahun  : {rp(annual_gross)}",
        f"PTKP                : {rp(ptkp)} (-)",
        f"PKP                 : {rp(pkp)}",
        f"PPh 21 Setahun      : {rp(annual_tax)}",
        f"PPh 21 Sebulan      : {rp(monthly_tax)}",
    ]
    return lines


def format_gross_up_report(result: dict, is_married: bool, dependents: int) -> List[str]:
    net = result["net_salary"]
    gross = result["gross_salary"]
    rate = format_number(result["rate"])

    lines = [
        "",
        "=== HASIL PERHITUNGAN GROSS UP ===",
        "",
        "[KARYAWAN MENERIMA]:",
        f"Gaji Bersih (Take Home Pay): {rp(net)} per bulan",
        f"Gaji Bersih Setahun       : {rp(net * 12)}",
        "",
        "[PERUSAHAAN MENGELUARKAN]:",
        f"Gaji Kotor (Gross Up) : {rp(gross)} per bulan",
        f"Gaji Kotor Setahun    : {rp(gross * 12)}",
        "",
        "[PERHITUNGAN PAJAK]:",
        f"Status              : {status_label(is_married)}",
    ]
    if is_married:
        lines.append(f"Jumlah Tanggungan   : {dependents}")

    lines += [
        f"PTKP (Status {result['tax_status']})    : {rp(result['ptkp'])} per tahun",
        "",
        "[PENGHASILAN KENA PAJAK (PKP)]",
        f"Gaji Setahun - PTKP: {rp(gross * 12)} - {rp(result['ptkp'])} = {rp(result['pkp'])}",
        "",
        "[PERHITUNGAN PPh 21]",
        f"DPP (Dasar Pengenaan Pajak): {rp(result['dpp'])}",
        f"Tarif                     : {rate:>15}%",
        f"PPh 21                    : {rp(result['monthly_tax'])}",
        "",
        "Rincian Perhitungan:",
        f"{rate}% x {rp(result['dpp'])} = {rp(result['monthly_tax'])}",
        "",
        "[RINGKASAN TAHUNAN]",
        f"Gaji Kotor Setahun  : {rp(gross * 12)}",
        f"PTKP                : {rp(result['ptkp'])} (-)",
        f"PKP                 : {rp(result['pkp'])}",
        f"PPh 21 Setahun      : {rp(result['annual_tax'])}",
        f"Gaji Bersih Setahun : {rp(net * 12)}",
        "",
        "[Keterangan]:",
        "* Perusahaan menanggung beban pajak karyawan",
        "* Karyawan menerima gaji bersih sesuai yang dijanjikan",
    ]
    return lines


def format_income_tax_report(amount: float, tax: float) -> List[str]:
    return [
        "",
        "Hasil Perhitungan Pajak Penghasilan:",
        f"Penghasilan Kena Pajak: {rp(amount)}",
        f"Pajak yang harus dibayar: {rp(tax)}",
        f"Penghasilan Bersih: {rp(amount - tax)}",
    ]


def format_vat_report(amount: float, rate: float, vat: float) -> List[str]:
    return [
        "",
        f"Hasil Perhitungan PPN ({format_number(rate)}%):",
        f"Harga sebelum PPN: {rp(amount)}",
        f"PPN: {rp(vat)}",
        f"Total yang harus dibayar: {rp(amount + vat)}",
    ]


class TaxCalculatorConsole:
    """Menu loop; ``read_line`` and ``write`` default to the terminal."""

    def __init__(self,
                 read_line: Optional[Callable[[], str]] = None,
                 write: Optional[Callable[[str], None]] = None,
                 vat_rate: Optional[float] = None):
        self.read_line = read_line or input
        self.write = write or print
        self.vat_rate = get_vat_rate() if vat_rate is None else vat_rate

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_line()

    def emit(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.write(line)

    def ask_status(self) -> Tuple[bool, int]:
        is_married = parse_marital_status(
            self.ask("\nStatus Perkawinan:\n1. Belum Kawin\n2. Kawin")
        )
        dependents = 0
        if is_married:
            dependents = parse_dependents(self.ask("\nJumlah Tanggungan (anak/kondisi lain):"))
        return is_married, dependents

    def hitung_pph21_gross(self) -> None:
        self.write("\n=== Perhitungan PPh 21 (Pegawai Tetap) - Gross ===")
        self.write("\n* Karyawan menanggung sendiri pajak penghasilannya")

        raw_income = self.ask("\nMasukkan Penghasilan Bruto per bulan (Rp):")
        is_married, dependents = self.ask_status()

        amount = parse_amount(raw_income)
        annual_tax, monthly_tax, ptkp, pkp = calculate_pph21(amount, is_married, dependents)
        self.emit(format_pph21_report(
            amount, is_married, dependents, annual_tax, monthly_tax, ptkp, pkp
        ))

    def hitung_pph21_gross_up(self) -> None:
        self.write("\n=== Perhitungan PPh 21 (Pegawai Tetap) - Gross Up ===")
        self.write("* Perusahaan menanggung beban pajak karyawan")

        net_salary = parse_amount(
            self.ask("\nMasukkan gaji bersih yang diinginkan per bulan (dalam Rupiah):")
        )
        is_married, dependents = self.ask_status()

        result = calculate_pph21_gross_up(net_salary, is_married, dependents)
        self.emit(format_gross_up_report(result, is_married, dependents))

    def hitung_pajak_penghasilan(self) -> None:
        self.write("\n=== Perhitungan Pajak Penghasilan Umum ===")
        amount = parse_amount(self.ask("Masukkan penghasilan kena pajak (dalam Rupiah):"))

        tax = calculate_income_tax(amount)
        self.emit(format_income_tax_report(amount, tax))

    def hitung_ppn(self) -> None:
        self.write("\n=== Perhitungan PPN (Pajak Pertambahan Nilai) ===")
        raw_amount = self.ask("Masukkan jumlah harga (dalam Rupiah):")
        rate = parse_rate(
            self.ask(f"Masukkan persentase PPN (default {format_number(self.vat_rate)}%):"),
            self.vat_rate,
        )

        amount = parse_amount(raw_amount)
        vat = calculate_vat(amount, rate)
        self.emit(format_vat_report(amount, rate, vat))

    def run(self) -> None:
        actions = {
            "1": self.hitung_pph21_gross,
            "2": self.hitung_pph21_gross_up,
            "3": self.hitung_pajak_penghasilan,
            "4": self.hitung_ppn,
        }

        self.write("=== KALKULATOR PAJAK ===")
        while True:
            self.emit(MENU)
            try:
                choice = self.read_line().strip()
                if choice == "5":
                    self.write(MSG_GOODBYE)
                    return

                action = actions.get(choice)
                if action is None:
                    self.write(MSG_INVALID_CHOICE)
                    continue

                try:
                    action()
                except ValidationError as e:
                    logger.info(f"Rejected input: {e}")
                    self.write(MSG_INVALID_AMOUNT)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving menu")
                self.write(MSG_GOODBYE)
                return


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kalkulator-pajak",
        description="Kalkulator PPh 21, Pajak Penghasilan dan PPN",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Log level (or set KALKULATOR_PAJAK_LOG_LEVEL)",
    )
    parser.add_argument(
        "--vat-rate",
        type=float,
        default=None,
        help="Default PPN rate in percent (or set KALKULATOR_PAJAK_VAT_RATE)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    set_log_level(args.log_level or get_log_level())

    if args.vat_rate is not None and (not math.isfinite(args.vat_rate) or args.vat_rate < 0):
        parser.error("--vat-rate must be a non-negative number")

    TaxCalculatorConsole(vat_rate=args.vat_rate).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
