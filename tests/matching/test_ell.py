# tests/matching/test_ell.py
import math

import numpy as np
import pytest

from rfmatch_core.matching import CL, calc_hp_ell_cl, calc_hp_ell_lc, calc_lp_ell_cl, calc_lp_ell_lc
from rfmatch_core.units import Unit

W_275 = 2 * math.pi * 275e9
W_175G = 2 * math.pi * 175e9
W_175M = 2 * math.pi * 175e6

FF_PH = (Unit.FEMTO, Unit.PICO)
PF_NH = (Unit.PICO, Unit.NANO)


def assert_cl(result: CL, c, l, q):
    assert result.c == pytest.approx(c)
    assert result.l == pytest.approx(l)
    assert result.q == pytest.approx(q)
    assert result.is_feasible


def assert_nan(result: CL):
    assert np.isnan([result.c, result.l, result.q]).all()
    assert not result.is_feasible


HIGHPASS_CASES = [
    (42.4 - 19.6j, 212.3 + 43.2j, W_275, FF_PH, (8.58125245724517, 69.18681390709257, 2.0529004985170953)),
    (62.4 - 14.6j, 202.3 + 23.2j, W_175M, PF_NH, (11.408503434826747, 133.4483264614267, 1.5114976179652644)),
    (212.3 + 43.2j, 42.4 - 19.6j, W_175G, FF_PH, None),
]

LOWPASS_CASES = [
    (212.3 + 43.2j, 42.4 - 19.6j, W_275, FF_PH, (5.906505625073422, 61.719118523742445, 2.0529004985170953)),
    (202.3 + 23.2j, 62.4 - 14.6j, W_175M, PF_NH, (7.2157251698188345, 99.0557187033109, 1.5114976179652644)),
    (42.4 - 19.6j, 212.3 + 43.2j, W_275, FF_PH, None),
]


@pytest.mark.parametrize("zs, zl, w, units, expected", HIGHPASS_CASES)
def test_hp_ell_cl(zs, zl, w, units, expected):
    result = calc_hp_ell_cl(zs, zl, w, *units)
    if expected is None:
        assert_nan(result)
    else:
        assert_cl(result, *expected)


@pytest.mark.parametrize("zs, zl, w, units, expected", HIGHPASS_CASES)
def test_hp_ell_lc_is_the_mirror_image(zs, zl, w, units, expected):
    result = calc_hp_ell_lc(zl, zs, w, *units)
    if expected is None:
        assert_nan(result)
    else:
        assert_cl(result, *expected)


@pytest.mark.parametrize("zs, zl, w, units, expected", LOWPASS_CASES)
def test_lp_ell_cl(zs, zl, w, units, expected):
    result = calc_lp_ell_cl(zs, zl, w, *units)
    if expected is None:
        assert_nan(result)
    else:
        assert_cl(result, *expected)


@pytest.mark.parametrize("zs, zl, w, units, expected", LOWPASS_CASES)
def test_lp_ell_lc_is_the_mirror_image(zs, zl, w, units, expected):
    result = calc_lp_ell_lc(zl, zs, w, *units)
    if expected is None:
        assert_nan(result)
    else:
        assert_cl(result, *expected)


@pytest.mark.parametrize("solver", [calc_hp_ell_cl, calc_hp_ell_lc, calc_lp_ell_cl, calc_lp_ell_lc])
def test_conjugate_ports_need_no_network(solver):
    result = solver(42.4 - 19.6j, 42.4 + 19.6j, W_275)
    assert (result.c, result.l, result.q) == (0.0, 0.0, 0.0)


def test_unit_labels_follow_the_requested_units():
    result = calc_hp_ell_cl(62.4 - 14.6j, 202.3 + 23.2j, W_175M, Unit.PICO, Unit.NANO)
    assert (result.c_unit, result.l_unit) == ("pF", "nH")
    default = calc_hp_ell_cl(42.4 - 19.6j, 212.3 + 43.2j, W_275)
    assert (default.c_unit, default.l_unit) == ("fF", "pH")
