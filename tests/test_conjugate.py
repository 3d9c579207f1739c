# tests/test_conjugate.py
import cmath
import math

import pytest

from rfmatch_core.conjugate import ConjugateMatch, calc_match
from rfmatch_core.errors import MalformedRequestError
from rfmatch_core.rf_utils import calc_z_from_rc
from rfmatch_core.units import Unit

S11 = (0.34, 0.21)
S12 = (0.0434, -0.0052)
S21 = (0.32, -3.4)
S22 = (0.34, -0.52)


@pytest.fixture(scope="module")
def match() -> ConjugateMatch:
    return calc_match(S11, S12, S21, S22, "ri", 100, 275e9, Unit.FEMTO)


def test_stability_and_gain(match):
    assert match.k == pytest.approx(1.7031802961437423)
    assert match.b1 == pytest.approx(0.7195251545599999)
    assert match.b2 == pytest.approx(1.1721251545600002)
    assert match.mag == pytest.approx(14.039928315508192)
    assert match.unconditionally_stable


def test_source_port(match):
    assert match.source.gamma == pytest.approx(0.5040400052246673 - 0.13478919243703535j)
    assert match.source.z == pytest.approx(275.52180881729475 - 102.05718583392367j)
    assert match.source.z0 == 100
    assert match.source.freq_hz == 275e9


def test_load_port(match):
    assert match.load.gamma == pytest.approx(0.31959462490960494 + 0.6148725683749898j)
    assert match.load.z == pytest.approx(61.804850661047205 + 146.22072038786013j)


@pytest.mark.parametrize("port", ["source", "load"])
def test_parallel_rc_describes_the_port_impedance(match, port):
    matched = getattr(match, port)
    assert (matched.r_unit, matched.c_unit) == ("Ω", "fF")
    assert calc_z_from_rc(matched.r, matched.c, 275e9, Unit.BASE, Unit.FEMTO) == pytest.approx(matched.z)


def test_magnitude_angle_input_gives_the_same_match(match):
    polar = [(abs(complex(*s)), math.degrees(cmath.phase(complex(*s)))) for s in (S11, S12, S21, S22)]
    again = calc_match(*polar, fmt="ma", z0=100, freq=275e9)
    assert again.k == pytest.approx(match.k)
    assert again.load.z == pytest.approx(match.load.z)


def test_unknown_format():
    with pytest.raises(MalformedRequestError, match="ComplexType not recognized"):
        calc_match(S11, S12, S21, S22, "xy")
