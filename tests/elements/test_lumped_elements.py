# tests/elements/test_lumped_elements.py
import numpy as np
import pytest

from rfmatch_core.elements import Capacitor, Inductor, Orientation, Resistor, Rlc, create_element
from rfmatch_core.elements.evaluate import calc_arc, calc_cascade, calc_element_impedance
from rfmatch_core.units import Unit

Z0 = 50.0
NPTS = 10


class TestCapacitor:

    def test_lossless_impedance(self, freq_280ghz):
        cap = create_element("capacitor", [0, 20], ["Q", "fF"])
        assert isinstance(cap, Capacitor)
        assert cap.z(freq_280ghz) == pytest.approx(-28.420525552124168j)

    def test_series_arc(self, freq_280ghz):
        trace = calc_arc("capacitor", [0, 20], ["Q", "fF"], 1 + 0j, Z0, freq_280ghz, NPTS)
        np.testing.assert_allclose(trace.x_coord, [
            0.0, 0.0008070743774802617, 0.003220499960917648, 0.007217071688202465,
            0.012758731362111475, 0.019793464288161443, 0.0282564992114107,
            0.03807176084762063, 0.04915351593258457, 0.06140814908058681, 0.07473600388106642,
        ], atol=1e-12)
        np.testing.assert_allclose(trace.y_coord, [
            0.0, -0.02839758807415652, -0.056657994501388566, -0.08464623774539427,
            -0.11223166280573833, -0.13928992447278707, -0.16570476596563613,
            -0.19136954270098003, -0.2161884543726832, -0.24007746313863623, -0.2629648904415866,
        ], atol=1e-12)
        assert trace.start == (1.0, 0.0)
        assert trace.end == pytest.approx((1.0, -28.420525552124168 / Z0))

    def test_q_sets_series_resistance(self, freq_280ghz):
        cap = Capacitor(10, 20, Unit.Q, Unit.FEMTO)
        z = cap.z(freq_280ghz)
        assert z.real == pytest.approx(-z.imag / 10)

    def test_plain_series_resistance(self, freq_280ghz):
        cap = Capacitor(2, 20, Unit.BASE, Unit.FEMTO)
        assert cap.r(freq_280ghz) == pytest.approx(2.0)
        assert cap.x(freq_280ghz) == pytest.approx(-28.420525552124168)


class TestInductor:

    def test_impedance_with_q(self, freq_280ghz):
        z = calc_element_impedance("inductor", [20, 10], ["Q", "pH"], freq_280ghz)
        assert z == pytest.approx(0.8796459430051421 + 17.59291886010284j)

    def test_series_arc(self, freq_280ghz):
        trace = calc_arc("inductor", [20, 10], ["Q", "pH"], 1 + 0j, Z0, freq_280ghz, NPTS)
        assert len(trace) == NPTS + 1
        assert (trace.x_coord[-1], trace.y_coord[-1]) == pytest.approx((0.03797835657688831, 0.16777188853307162))
        assert (trace.x_coord[1], trace.y_coord[1]) == pytest.approx((0.0011874729479519443, 0.017556584166845562))

    def test_zero_q_is_lossless(self, freq_280ghz):
        ind = Inductor(0, 10, Unit.Q, Unit.PICO)
        assert ind.r(freq_280ghz) == 0.0


class TestResistor:

    def test_series_arc_runs_along_the_real_axis(self, freq_280ghz):
        assert calc_element_impedance("resistor", [10], [], freq_280ghz) == 10
        trace = calc_arc("resistor", [10], [], 1 + 0j, Z0, freq_280ghz, NPTS)
        np.testing.assert_allclose(trace.x_coord, [
            0.0, 0.00990099009900991, 0.01960784313725492, 0.02912621359223304,
            0.03846153846153849, 0.04761904761904766, 0.056603773584905606,
            0.06542056074766352, 0.07407407407407404, 0.08256880733944952, 0.09090909090909088,
        ], atol=1e-12)
        np.testing.assert_allclose(trace.y_coord, 0.0, atol=1e-15)

    def test_prefixed_resistance(self):
        res = Resistor(2, Unit.KILO)
        assert res.z(1e9) == 2000


class TestRlc:

    def test_shunt_arc(self, freq_280ghz):
        rlc = create_element("rlc", [1, 10, 20], ["", "pH", "fF"], orientation="shunt")
        assert isinstance(rlc, Rlc)
        assert rlc.orientation is Orientation.SHUNT
        assert rlc.z(freq_280ghz) == pytest.approx(1 - 10.827606692021327j)

        trace = rlc.arc(freq_280ghz, 1 + 0j, Z0, NPTS)
        assert trace.end == pytest.approx((1.4228792324199453, 4.578770006867039))
        assert (trace.x_coord[-1], trace.y_coord[-1]) == pytest.approx((-0.8194271640921553, -0.34124750175185664))
        assert (trace.x_coord[1], trace.y_coord[1]) == pytest.approx((-0.06757431629692738, -0.20904803409867867))

    def test_zero_capacitance_drops_the_capacitive_term(self, freq_280ghz):
        rlc = Rlc(1, 10, 0)
        assert rlc.z(freq_280ghz) == pytest.approx(1 + 17.59291886010284j)


class TestCascade:

    def test_series_adds_impedance(self, freq_280ghz):
        zout = calc_cascade("resistor", [50], [], 1 + 0j, Z0, freq_280ghz)
        assert zout == pytest.approx(2 + 0j)

    def test_shunt_adds_admittance(self, freq_280ghz):
        zout = calc_cascade("resistor", [50], [], 1 + 0j, Z0, freq_280ghz, orientation="shunt")
        assert zout == pytest.approx(0.5 + 0j)

    def test_cascade_matches_arc_end(self, freq_280ghz):
        cap = create_element("pc", [0, 20], ["", "fF"])
        zin = 0.4 + 0.3j
        trace = cap.arc(freq_280ghz, zin, Z0, NPTS)
        y_end = complex(*trace.end)
        assert cap.cascade(freq_280ghz, zin, Z0) == pytest.approx(1 / y_end)
