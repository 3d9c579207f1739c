# src/rfmatch_core/elements/capabilities.py
"""
Structural contracts that chain tracing relies on.

Anything that can report its impedance is an `ImpedanceProvider`; anything
that can additionally draw itself on the chart and hand the next element its
input impedance is an `ArcTracer`. Both are runtime-checkable so that
`trace_chain` can reject foreign objects before doing any numerics.
"""
from typing import Protocol, runtime_checkable

from ..smith import ArcTrace


@runtime_checkable
class ImpedanceProvider(Protocol):
    def z(self, freq) -> complex:
        ...

    def z_norm(self, freq, z0: float) -> complex:
        ...


@runtime_checkable
class ArcTracer(ImpedanceProvider, Protocol):
    def arc(self, freq, zin_norm: complex, z0: float, npts: int, verbose: bool = False) -> ArcTrace:
        ...

    def cascade(self, freq, zin_norm: complex, z0: float) -> complex:
        ...
