import logging

import pytest

from kalkulator_pajak.config import config


@pytest.mark.parametrize(
    "tax_status,expected",
    [
        ("TK/0", 54_000_000.0),
        ("K/0", 58_500_000.0),
        ("K/1", 63_000_000.0),
        ("K/2", 67_500_000.0),
        ("K/3", 72_000_000.0),
    ],
)
def test_lookup_ptkp_found(tax_status, expected):
    assert config.lookup_ptkp(tax_status) == expected


def test_lookup_ptkp_unknown_status_returns_zero(caplog):
    caplog.set_level(logging.WARNING, logger="kalkulator_pajak")
    assert config.lookup_ptkp("TK/3") == 0.0
    assert any("TK/3" in rec.getMessage() for rec in caplog.records)


def test_lookup_ptkp_empty_status_returns_zero():
    assert config.lookup_ptkp("") == 0.0
    assert config.lookup_ptkp(None) == 0.0


def test_ptkp_table_is_read_only():
    with pytest.raises(TypeError):
        config.PTKP_TABLE["TK/0"] = 1


@pytest.mark.parametrize(
    "is_married,dependents,expected",
    [(False, 0, "TK/0"), (True, 0, "K/0"), (True, 3, "K/3")],
)
def test_get_tax_status(is_married, dependents, expected):
    assert config.get_tax_status(is_married, dependents) == expected


def test_validate_ptkp_table_accepts_builtin_table():
    assert config.validate_ptkp_table(config.PTKP_TABLE) == []


def test_validate_ptkp_table_reports_problems():
    table = dict(config.PTKP_TABLE)
    del table["K/1"]
    table["K/3"] = 1_000.0
    table["TK/0"] = "54 juta"

    errors = config.validate_ptkp_table(table)
    assert "ptkp missing status K/1" in errors
    assert "ptkp value for TK/0 is not a number" in errors
    assert any("must not decrease" in err for err in errors)
