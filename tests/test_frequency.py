# tests/test_frequency.py
import math

import pytest

from rfmatch_core.frequency import Frequency, as_hz
from rfmatch_core.units import Unit


def test_frequency_in_display_units(freq_280ghz):
    assert freq_280ghz.hz == pytest.approx(280e9)
    assert freq_280ghz.w == pytest.approx(2 * math.pi * 280e9)
    assert freq_280ghz.wavelength(3.4) == pytest.approx(3e8 / (280e9 * math.sqrt(3.4)))
    assert freq_280ghz.beta() == pytest.approx(2 * math.pi / freq_280ghz.wavelength())


def test_unit_aliases_are_accepted():
    assert Frequency(280, "GHz").unit is Unit.GIGA
    assert Frequency(175, "mega").hz == pytest.approx(175e6)


def test_converted_keeps_the_physical_frequency(freq_280ghz):
    mhz = freq_280ghz.converted(Unit.MEGA)
    assert mhz.unit is Unit.MEGA
    assert mhz.value == pytest.approx(280e3)
    assert mhz.hz == pytest.approx(freq_280ghz.hz)


@pytest.mark.parametrize("value, expected_hz", [
    ("280 GHz", 280e9),
    ("175 MHz", 175e6),
    ("1.5 THz", 1.5e12),
    (275e9, 275e9),
])
def test_from_quantity(value, expected_hz):
    freq = Frequency.from_quantity(value, Unit.GIGA)
    assert freq.unit is Unit.GIGA
    assert freq.hz == pytest.approx(expected_hz)
    assert freq.value == pytest.approx(expected_hz * 1e-9)


def test_as_hz_accepts_frequency_or_number(freq_280ghz):
    assert as_hz(freq_280ghz) == pytest.approx(280e9)
    assert as_hz(1e9) == 1e9
    assert as_hz(5) == 5.0
