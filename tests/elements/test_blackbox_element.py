# tests/elements/test_blackbox_element.py
import pytest

from rfmatch_core.elements import BlackBox, CustomImpedance, create_element
from rfmatch_core.smith import find_smith_coord


class TestBlackBox:

    def test_fixed_impedance(self):
        box = create_element("bb", [25, -10], [])
        assert isinstance(box, BlackBox)
        assert box.z(1e9) == 25 - 10j
        assert box.z(100e9) == 25 - 10j

    def test_differential_halves_the_impedance(self):
        box = create_element("blackbox", [25, -10], [], differential=True)
        assert box.z(1e9) == pytest.approx(12.5 - 5j)

    def test_arc_sweeps_from_the_running_impedance(self):
        box = BlackBox(25, 10)
        trace = box.arc(1e9, 0.5 + 0.2j, 50.0, 10)
        assert len(trace) == 11
        assert trace.points[0] == pytest.approx(find_smith_coord(0.5, 0.2))
        assert trace.points[0] == pytest.approx((-0.31004, 0.17467), abs=1e-5)
        assert trace.points[5] == pytest.approx(find_smith_coord(0.75, 0.3))
        assert trace.points[-1] == pytest.approx((0.03846, 0.19231), abs=1e-5)
        assert trace.start == pytest.approx((0.5, 0.2))
        assert trace.end == pytest.approx((1.0, 0.4))

    def test_arc_ends_where_the_cascade_lands(self):
        box = BlackBox(50, 50, differential=True)
        trace = box.arc(1e9, 1 + 0j, 50.0, 8)
        zout = box.cascade(1e9, 1 + 0j, 50.0)
        assert zout == pytest.approx(1.5 + 0.5j)
        assert complex(*trace.end) == pytest.approx(zout)
        assert trace.points[-1] == pytest.approx(find_smith_coord(zout.real, zout.imag))


class TestCustomImpedance:
    LUT = [(1e9, 10.0, 5.0), (2e9, 20.0, -5.0), (3e9, 30.0, 0.0)]

    def test_interpolated_impedance(self):
        elem = create_element("custom_z", [], lut=self.LUT)
        assert isinstance(elem, CustomImpedance)
        assert elem.z(1.5e9) == pytest.approx(15 + 0j)
        assert elem.z(0.1e9) == pytest.approx(10 + 5j)

    def test_cascades_in_series(self):
        elem = CustomImpedance(self.LUT)
        assert elem.cascade(0.1e9, 1 + 0j, 50.0) == pytest.approx(1.2 + 0.1j)
