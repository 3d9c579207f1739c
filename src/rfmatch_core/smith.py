# --- src/rfmatch_core/smith.py ---
"""
Smith chart coordinates and arc discretization.

`find_smith_coord` maps a normalized impedance (or, with `rotate`, a normalized
admittance) onto the reflection-coefficient plane. The arc helpers sample the
trajectory an element draws on the chart as its value grows from zero to the
full value, always returning `resolution + 1` points.
"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .constants import ZERO_TOLERANCE
from .errors import MalformedRequestError
from .rf_utils import calc_z

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def find_smith_coord(re: float, im: float, rotate: bool = False, verbose: bool = False) -> Point:
    """
    Chart coordinates of the normalized value re + j*im.

    A non-finite imaginary part is clamped to zero, which places a pure open
    circuit (X = ±inf) on the real axis. With `rotate` the value is taken as an
    admittance and inverted before mapping.
    """
    re = np.float64(re)
    im = np.float64(im)
    if not np.isfinite(im):
        im = np.float64(0.0)
    z = np.complex128(complex(re, im))
    with np.errstate(divide="ignore", invalid="ignore"):
        if rotate:
            z = 1 / z
        gamma = (z - 1) / (z + 1)
    coord = (float(gamma.real), float(gamma.imag))
    if verbose:
        logger.info(f"find_smith_coord({float(re)}, {float(im)}, rotate={rotate}) -> {coord}")
    return coord


@dataclass(frozen=True)
class ArcTrace:
    """
    A sampled element trajectory.

    `start` and `end` are the normalized impedance (series) or admittance
    (shunt) at either end of the arc, not chart coordinates.
    """
    x_coord: Tuple[float, ...]
    y_coord: Tuple[float, ...]
    start: Point
    end: Point

    def __len__(self) -> int:
        return len(self.x_coord)

    @property
    def points(self) -> List[Point]:
        return list(zip(self.x_coord, self.y_coord))


def _check_resolution(npts) -> None:
    if int(npts) < 1:
        raise MalformedRequestError(f"An arc needs at least one step, got npts={npts}.")


def linear_arc(start: complex, end: complex, npts: int, rotate: bool, verbose: bool = False) -> Tuple[List[float], List[float]]:
    """Samples a straight line in the z (or y) plane and maps each sample onto the chart."""
    _check_resolution(npts)
    x_coord, y_coord = [], []
    for i in range(npts + 1):
        re = start.real + (end.real - start.real) * i / npts
        im = start.imag + (end.imag - start.imag) * i / npts
        x, y = find_smith_coord(re, im, rotate, verbose)
        x_coord.append(x)
        y_coord.append(y)
    return x_coord, y_coord


@dataclass(frozen=True)
class ArcPoints:
    x_coord: Tuple[float, ...]
    y_coord: Tuple[float, ...]
    end_x_coord: float
    end_y_coord: float
    real_old: float
    imag_old: float
    start_x_coord: float
    start_y_coord: float
    x1: float
    y1: float
    x2: float
    y2: float


def arc_smith_points(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    type_: str,
    rotate: bool,
    beta: float = 0.0,
    start_at_qtr_wl: float = 0.0,
    z0: float = 50.0,
    resolution: int = 100,
    verbose: bool = False,
) -> ArcPoints:
    """
    Samples a multi-segment arc.

    For 'transmission_line', 'ss' (shorted stub) and 'so' (open stub), (x1, y1)
    is the normalized starting value, `x2` the line length in metres and `y2`
    the line impedance in ohms. For any other `type_` the arc runs linearly
    from (x1, y1) to (x2, y2).

    `real_old` / `imag_old` hold the normalized value reached at the end of
    the arc, which is where the next element in a chain starts.
    """
    _check_resolution(resolution)
    beta = np.float64(beta)
    start_x, start_y = find_smith_coord(x1, y1, rotate, verbose)
    line_zo = np.float64(y2)
    line_length = np.float64(x2)
    x_coord, y_coord = [], []

    with np.errstate(divide="ignore", invalid="ignore"):
        if type_ == "transmission_line":
            zl = np.complex128(calc_z(complex(start_x, start_y), z0))
            zi = zl / z0
            for i in range(resolution + 1):
                tan_bl = np.tan(beta * i * line_length / resolution)
                zi = line_zo * ((zl + 1j * line_zo * tan_bl) / (line_zo + 1j * zl * tan_bl)) / z0
                x, y = find_smith_coord(zi.real, zi.imag, False, verbose)
                x_coord.append(x)
                y_coord.append(y)
            real_old, imag_old = float(zi.real), float(zi.imag)

        elif type_ in ("ss", "so"):
            b = np.float64(0.0)
            qtr = np.float64(start_at_qtr_wl)
            for i in range(resolution + 1):
                if type_ == "ss":
                    if abs(qtr) <= ZERO_TOLERANCE:
                        arg = beta * i * line_length / resolution
                    else:
                        arg = beta * (qtr + i * (line_length - qtr) / resolution)
                    b = -1 / (np.tan(arg) * line_zo / z0)
                else:
                    b = np.tan(beta * i * line_length / resolution) / (line_zo / z0)
                x, y = find_smith_coord(x1, y1 + b, rotate, verbose)
                x_coord.append(x)
                y_coord.append(y)
            real_old, imag_old = float(x1), float(y1 + b)

        else:
            x_coord, y_coord = linear_arc(complex(x1, y1), complex(x2, y2), resolution, rotate, verbose)
            real_old, imag_old = float(x2), float(y2)

    if verbose:
        logger.info(f"arc_smith_points[{type_}] ended at ({x_coord[-1]}, {y_coord[-1]}), value {real_old} + j{imag_old}")

    return ArcPoints(
        x_coord=tuple(x_coord),
        y_coord=tuple(y_coord),
        end_x_coord=x_coord[-1],
        end_y_coord=y_coord[-1],
        real_old=real_old,
        imag_old=imag_old,
        start_x_coord=start_x,
        start_y_coord=start_y,
        x1=float(x1),
        y1=float(y1),
        x2=float(x2),
        y2=float(y2),
    )

