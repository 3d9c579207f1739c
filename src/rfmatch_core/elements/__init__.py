# src/rfmatch_core/elements/__init__.py
from .base import (
    ELEMENT_REGISTRY,
    ORIENTED_TAGS,
    ElementBase,
    Orientation,
    create_element,
    lookup_element,
    register_element,
)
from .capabilities import ArcTracer, ImpedanceProvider
from .exceptions import ElementError, UnknownElementError

# Importing the concrete modules registers their element types.
from .lumped import Resistor, Capacitor, Inductor, Rlc
from .distributed import TransmissionLine, OpenStub, ShortedStub, electrical_length
from .transformer import Transformer
from .blackbox import BlackBox, CustomImpedance
from .evaluate import calc_arc, calc_cascade, calc_element_impedance

__all__ = [
    # Framework
    "ElementBase", "Orientation", "ELEMENT_REGISTRY", "ORIENTED_TAGS",
    "register_element", "lookup_element", "create_element",
    "ImpedanceProvider", "ArcTracer",
    # Elements
    "Resistor", "Capacitor", "Inductor", "Rlc",
    "TransmissionLine", "OpenStub", "ShortedStub", "electrical_length",
    "Transformer", "BlackBox", "CustomImpedance",
    # Entry points
    "calc_arc", "calc_element_impedance", "calc_cascade",
    # Errors
    "ElementError", "UnknownElementError",
]
