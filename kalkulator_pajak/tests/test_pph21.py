import pytest

from kalkulator_pajak.config import pph21


def test_calculate_pph21_single_no_dependents():
    annual_tax, monthly_tax, ptkp, pkp = pph21.calculate_pph21(6_000_000, False, 0)

    # PKP = (6,000,000 * 12) - 54,000,000
    assert ptkp == pytest.approx(54_000_000)
    assert pkp == pytest.approx(18_000_000)
    assert monthly_tax == pytest.approx(45_000)
    assert annual_tax == pytest.approx(540_000)


def test_calculate_pph21_married_with_dependents():
    annual_tax, monthly_tax, ptkp, pkp = pph21.calculate_pph21(10_000_000, True, 2)

    assert ptkp == pytest.approx(67_500_000)
    assert pkp == pytest.approx(52_500_000)
    assert monthly_tax == pytest.approx(75_000)
    assert annual_tax == pytest.approx(900_000)


def test_calculate_pph21_zero_income():
    annual_tax, monthly_tax, ptkp, pkp = pph21.calculate_pph21(0, False, 0)

    assert annual_tax == 0
    assert monthly_tax == 0
    assert ptkp == 54_000_000
    assert pkp == 0


def test_calculate_pph21_taxes_gross_not_pkp():
    # Income below PTKP still pays the flat rate on gross
    annual_tax, monthly_tax, _, pkp = pph21.calculate_pph21(4_000_000, True, 3)

    assert pkp == 0
    assert monthly_tax == 30_000
    assert annual_tax == 360_000


def test_calculate_pph21_rounds_half_up():
    # 0.75% x 100 = 0.75 per month, 9 per year
    annual_tax, monthly_tax, _, _ = pph21.calculate_pph21(100, False, 0)
    assert monthly_tax == 1
    assert annual_tax == 9


def test_calculate_pph21_unknown_status_uses_zero_ptkp():
    _, _, ptkp, pkp = pph21.calculate_pph21(1_000_000, True, 7)
    assert ptkp == 0.0
    assert pkp == 12_000_000


def test_gross_up_uses_fixed_dpp():
    result = pph21.calculate_pph21_gross_up(6_000_000, False, 0)

    assert result["dpp"] == 6_045_340
    assert result["monthly_tax"] == pytest.approx(45_340)
    assert result["gross_salary"] == pytest.approx(6_045_340)
    assert result["annual_tax"] == pytest.approx(544_080)
    assert result["tax_status"] == "TK/0"
    assert result["ptkp"] == 54_000_000
    assert result["pkp"] == pytest.approx(18_544_080)


@pytest.mark.parametrize("net_salary", [0, 1_500_000, 25_000_000])
def test_gross_up_tax_does_not_depend_on_net_salary(net_salary):
    result = pph21.calculate_pph21_gross_up(net_salary, True, 1)

    assert result["monthly_tax"] == 45_340
    assert result["gross_salary"] == pytest.approx(net_salary + 45_340)
    assert result["ptkp"] == 63_000_000
    assert result["pkp"] == pytest.approx(max((net_salary + 45_340) * 12 - 63_000_000, 0))


def test_calculate_pph21_annual_overflow_does_not_raise():
    annual_tax, monthly_tax, ptkp, pkp = pph21.calculate_pph21(1e308, False, 0)

    assert annual_tax == float("inf")
    assert pkp == float("inf")
    assert monthly_tax == pytest.approx(7.5e305)
    assert ptkp == 54_000_000
