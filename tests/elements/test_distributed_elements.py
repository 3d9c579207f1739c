# tests/elements/test_distributed_elements.py
import math

import numpy as np
import pytest

from rfmatch_core.elements import (
    OpenStub, Orientation, ShortedStub, TransmissionLine, calc_arc, create_element, electrical_length
)
from rfmatch_core.units import Unit

Z0 = 50.0
NPTS = 10


class TestTransmissionLine:

    @pytest.fixture
    def line(self):
        return create_element("tl", [100, 100], ["", "u"], zl=50)

    def test_impedance(self, line, freq_280ghz):
        assert isinstance(line, TransmissionLine)
        assert line.z(freq_280ghz) == pytest.approx(64.90822960372651 + 44.877378829891j)

    def test_arc(self, line, freq_280ghz):
        trace = line.arc(freq_280ghz, 1 + 0j, Z0, NPTS)
        assert len(trace) == NPTS + 1
        assert trace.start == pytest.approx((1.0, 0.0))
        assert (trace.x_coord[-1], trace.y_coord[-1]) == pytest.approx((0.24491304389596288, 0.2948990119806981))
        assert (trace.x_coord[1], trace.y_coord[1]) == pytest.approx((0.0032141661008425397, 0.043796903963428))
        assert complex(*trace.end) == pytest.approx((64.90822960372651 + 44.877378829891j) / Z0)

    def test_arc_is_loaded_by_the_running_impedance(self, line, freq_280ghz):
        zin = 0.5 + 0.2j
        trace = calc_arc("tl", [100, 100], ["base", "um"], zin_norm=zin, z0=Z0, freq=280e9, npts=NPTS)
        assert trace.points[0] == pytest.approx((-0.31004, 0.17467), abs=1e-5)
        assert complex(*trace.start) == pytest.approx(zin)
        assert complex(*trace.end) == pytest.approx(line.cascade(freq_280ghz, zin, Z0))
        np.testing.assert_allclose(line.arc(freq_280ghz, zin, Z0, NPTS).x_coord, trace.x_coord)

    def test_cascade_uses_the_running_impedance(self, line, freq_280ghz):
        assert line.cascade(freq_280ghz, 1 + 0j, Z0) == pytest.approx((64.90822960372651 + 44.877378829891j) / Z0)
        reloaded = line.loaded(100 + 0j)
        assert reloaded.zl == 100
        assert reloaded.z(freq_280ghz) == pytest.approx(line.cascade(freq_280ghz, 2 + 0j, Z0) * Z0)

    def test_quarter_wave_length_in_wavelengths(self, freq_280ghz):
        line = TransmissionLine(50, 0.25, Unit.LAMBDA, zl=100)
        assert line.length_m(freq_280ghz) == pytest.approx(0.25 * 3e8 / 280e9)
        betal, turns = electrical_length(line, freq_280ghz)
        assert betal == pytest.approx(math.pi / 2)
        assert turns == pytest.approx(0.25)
        assert line.z(freq_280ghz) == pytest.approx(25 + 0j, abs=1e-6)

    def test_permittivity_shortens_the_wavelength(self, freq_280ghz):
        line = TransmissionLine(50, 0.5, Unit.LAMBDA, er=4.0)
        assert line.wavelength(freq_280ghz) == pytest.approx(3e8 / 280e9 / 2)
        assert line.length_m(freq_280ghz) == pytest.approx(0.5 * 3e8 / 280e9 / 2)


class TestOpenStub:

    def test_impedance_and_arc(self, freq_280ghz):
        stub = create_element("os", [100, 100], ["", "um"])
        assert isinstance(stub, OpenStub)
        assert stub.z(freq_280ghz) == pytest.approx(-150.51209976895348j)

        trace = stub.arc(freq_280ghz, 1 + 0j, Z0, NPTS)
        assert (trace.x_coord[-1], trace.y_coord[-1]) == pytest.approx((-0.026848356667989796, -0.1616401014977974))
        assert trace.end == pytest.approx((1.0, 0.3321992057565702))

    def test_stubs_are_always_shunt(self):
        stub = OpenStub(100, 100, Unit.MICRO, orientation=Orientation.SERIES)
        assert stub.orientation is Orientation.SHUNT
        assert stub.rotate


class TestShortedStub:

    @pytest.fixture
    def stub(self):
        return create_element("ss", [100, 100], ["", "u"])

    def test_impedance(self, stub, freq_280ghz):
        assert isinstance(stub, ShortedStub)
        assert stub.z(freq_280ghz) == pytest.approx(66.43984115131404j)

    def test_short_stub_sweeps_from_a_quarter_wavelength(self, stub, freq_280ghz):
        assert stub._sweep_start(freq_280ghz) == pytest.approx(0.00026785714285714287)
        trace = stub.arc(freq_280ghz, 1 + 0j, Z0, NPTS)
        assert (trace.x_coord[0], trace.y_coord[0]) == pytest.approx((0.0, 0.0), abs=1e-9)
        assert (trace.x_coord[-1], trace.y_coord[-1]) == pytest.approx((-0.12402633147792, 0.32961159047892885))
        assert trace.end == pytest.approx((1.0, -0.7525604988447677))

    def test_long_stub_sweeps_from_zero(self, freq_280ghz):
        stub = ShortedStub(100, 0.6, Unit.LAMBDA)
        assert stub._sweep_start(freq_280ghz) == 0.0
        trace = stub.arc(freq_280ghz, 1 + 0j, Z0, NPTS)
        # the infinite susceptance of a zero-length short is clamped onto the real axis
        assert (trace.x_coord[0], trace.y_coord[0]) == pytest.approx((0.0, 0.0))
        assert len(trace) == NPTS + 1
        assert np.isfinite(trace.end[1])
