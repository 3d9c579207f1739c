# tests/matching/test_networks.py
import math

import numpy as np
import pytest

from rfmatch_core.errors import DiagnosableError, MalformedRequestError
from rfmatch_core.matching import (
    CCLL, CL, CLQ, ImpedanceRepresentation, MatchingNetworks, MatchingRequestError, PiTee,
    calc_hp_ell_cl, calc_lp2, calc_networks, calc_pi, change_impedance, from_impedance, to_impedance
)
from rfmatch_core.rf_utils import calc_gamma
from rfmatch_core.units import Unit

W_275 = 2 * math.pi * 275e9
ZS = 42.4 - 19.6j
ZL = 212.3 + 43.2j


class TestCalcNetworks:

    @pytest.fixture(scope="class")
    def networks(self):
        return calc_networks(ZS.real, ZS.imag, ZL.real, ZL.imag, "zri", q_net=4.32, q=2.0, z0=50, freq=275e9)

    def test_every_topology_is_reported(self, networks):
        assert isinstance(networks, MatchingNetworks)
        topologies = networks.topologies()
        assert len(topologies) == 18
        assert list(topologies)[:4] == ["hp_ell_cl", "hp_ell_lc", "lp_ell_cl", "lp_ell_lc"]
        kinds = {type(result) for result in topologies.values()}
        assert kinds == {CL, CLQ, CCLL, PiTee}

    def test_results_match_the_individual_solvers(self, networks):
        assert networks.zs == ZS and networks.zl == ZL
        assert networks.hp_ell_cl == calc_hp_ell_cl(ZS, ZL, W_275)
        assert networks.lp2 == calc_lp2(ZS, ZL, W_275)
        assert networks.pi == calc_pi(ZS, ZL, W_275, 4.32)
        assert networks.hp_ell_cl.c == pytest.approx(8.58125245724517)
        assert networks.pi.c == pytest.approx(8.435997609374349)

    def test_q_is_routed_to_the_q_constrained_solvers(self, networks):
        for name in ("hp_ell_cl_w_q", "hp_ell_lc_w_q", "lp_ell_cl_w_q", "lp_ell_lc_w_q"):
            result = getattr(networks, name)
            assert result.q_target == 2.0 or np.isnan(result.q_target)

    def test_admittance_input(self):
        ys, yl = 1 / ZS, 1 / ZL
        networks = calc_networks(ys.real, ys.imag, yl.real, yl.imag, "yri", freq=275e9)
        assert networks.zs == pytest.approx(ZS)
        assert networks.zl == pytest.approx(ZL)
        assert networks.hp_ell_cl.c == pytest.approx(8.58125245724517)

    def test_reflection_coefficient_input(self):
        gs, gl = calc_gamma(ZS, 50), calc_gamma(ZL, 50)
        networks = calc_networks(gs.real, gs.imag, gl.real, gl.imag, "gri", z0=50, freq=275e9)
        assert networks.zs == pytest.approx(ZS)
        assert networks.zl == pytest.approx(ZL)

    def test_differential_ports_are_halved(self):
        networks = calc_networks(ZS.real, ZS.imag, ZL.real, ZL.imag, "zri", z_scale="diff", freq=275e9)
        assert networks.zs == pytest.approx(ZS / 2)
        assert networks.zl == pytest.approx(ZL / 2)
        assert networks.lp2 == calc_lp2(ZS / 2, ZL / 2, W_275)

    def test_frequency_object_and_units(self, freq_280ghz):
        networks = calc_networks(ZS.real, ZS.imag, ZL.real, ZL.imag, freq=freq_280ghz,
                                 c_unit=Unit.PICO, l_unit=Unit.NANO)
        assert networks.hp_ell_cl == calc_hp_ell_cl(ZS, ZL, freq_280ghz.w, Unit.PICO, Unit.NANO)
        assert networks.hp_ell_cl.c_unit == "pF"

    @pytest.mark.parametrize("kwargs", [{"imp": "zzz"}, {"z_scale": "balanced"}])
    def test_unrecognized_request(self, kwargs):
        with pytest.raises(MatchingRequestError, match="Impedance type not recognized") as exc_info:
            calc_networks(ZS.real, ZS.imag, ZL.real, ZL.imag, **kwargs)
        assert isinstance(exc_info.value, MalformedRequestError)
        assert isinstance(exc_info.value, DiagnosableError)
        assert "Malformed Matching Request" in exc_info.value.get_diagnostic_report()


class TestChangeImpedance:

    def test_same_representation_is_returned_unchanged(self):
        assert change_impedance(1, 2, 3, 4, "gma", "gma") == ((1, 2), (3, 4))

    def test_impedance_to_rc(self):
        (rs, cs), (rl, cl) = change_impedance(ZS.real, ZS.imag, ZL.real, ZL.imag, "zri", "rc", 50, 275e9)
        assert (rs, cs) == pytest.approx((51.46037735849057, 5.198818862788317))
        assert rl > 0 and cl < 0

    def test_reflection_coefficient_to_impedance(self):
        (a, b), _ = change_impedance(0.2464, -0.8745, 0.0, 0.0, "gri", "zri", z0=100)
        assert complex(a, b) == pytest.approx(13.096841624374102 - 131.24096072255193j)

    def test_magnitude_angle_form(self):
        (mag, ang), _ = change_impedance(ZS.real, ZS.imag, ZL.real, ZL.imag, "zri", "gma", 50)
        gamma = calc_gamma(ZS, 50)
        assert mag == pytest.approx(abs(gamma))
        assert ang == pytest.approx(math.degrees(math.atan2(gamma.imag, gamma.real)))
        assert to_impedance(mag, ang, ImpedanceRepresentation.GMA, 50) == pytest.approx(ZS)

    @pytest.mark.parametrize("rep", list(ImpedanceRepresentation))
    def test_every_representation_inverts(self, rep):
        a, b = from_impedance(ZS, rep, 50, 275e9, Unit.FEMTO)
        assert to_impedance(a, b, rep, 50, 275e9, Unit.FEMTO) == pytest.approx(ZS)

    @pytest.mark.parametrize("imp_in, imp_out", [("ohms", "zri"), ("zri", "smith")])
    def test_unrecognized_representation(self, imp_in, imp_out):
        with pytest.raises(MatchingRequestError, match=r"impedance unit\(s\) not recognized"):
            change_impedance(1, 2, 3, 4, imp_in, imp_out)
