"""Exact rational arithmetic on unbounded integers."""

from .backend import DEFAULT_BACKEND, IntegerBackend, PythonIntegerBackend
from .exceptions import DivisionByZero, InvalidDenominator, InvalidFormat, RationalError
from .rational import (
    Ordering,
    Rational,
    RationalRange,
    as_rational_array,
    div_by,
    parse,
    rationalize,
    zeros,
    zeros_like,
)

__version__ = "0.1.0"

__all__ = [
    "Rational",
    "RationalRange",
    "Ordering",
    "div_by",
    "parse",
    "rationalize",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "IntegerBackend",
    "PythonIntegerBackend",
    "DEFAULT_BACKEND",
    "RationalError",
    "InvalidDenominator",
    "DivisionByZero",
    "InvalidFormat",
]
