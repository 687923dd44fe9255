import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from kalkulator_pajak.config.config import DEFAULTS


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep KALKULATOR_PAJAK_* variables from the shell out of every test."""
    for key in list(os.environ):
        if key.startswith(DEFAULTS["ENV_PREFIX"]):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """Undo log level changes made by main() or set_log_level."""
    package_logger = logging.getLogger("kalkulator_pajak")
    previous = package_logger.level
    yield
    package_logger.setLevel(previous)
