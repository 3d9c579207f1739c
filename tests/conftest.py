# tests/conftest.py
import math

import pytest

from rfmatch_core.frequency import Frequency
from rfmatch_core.units import Unit

# Source/load pair used throughout the matching reference cases.
ZS = 42.4 - 19.6j
ZL = 212.3 + 43.2j

W_275GHZ = 2 * math.pi * 275e9


@pytest.fixture
def freq_280ghz():
    return Frequency(280, Unit.GIGA)


@pytest.fixture
def w_275ghz():
    return W_275GHZ


@pytest.fixture
def ports():
    """(zs, zl) of the reference match at 275 GHz."""
    return ZS, ZL


@pytest.fixture
def write_chain(tmp_path):
    """Writes a chain YAML document into the test's temp dir and returns its path."""
    def _write(content: str, name: str = "chain.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
