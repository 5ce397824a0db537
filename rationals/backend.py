"""Arbitrary-precision integer backends used by :class:`rationals.Rational`."""
from __future__ import annotations

import math
import numbers
from typing import Any, Protocol, Tuple


class IntegerBackend(Protocol):
    """Operations :class:`Rational` needs from an unbounded integer type."""

    zero: Any
    one: Any

    def coerce(self, value: Any) -> Any:
        ...

    def add(self, a: Any, b: Any) -> Any:
        ...

    def subtract(self, a: Any, b: Any) -> Any:
        ...

    def multiply(self, a: Any, b: Any) -> Any:
        ...

    def divmod(self, a: Any, b: Any) -> Tuple[Any, Any]:
        ...

    def gcd(self, a: Any, b: Any) -> Any:
        ...

    def compare(self, a: Any, b: Any) -> int:
        ...

    def negate(self, a: Any) -> Any:
        ...

    def to_float(self, a: Any) -> float:
        ...

    def to_str(self, a: Any) -> str:
        ...

    def from_str(self, text: str) -> Any:
        ...


class PythonIntegerBackend:
    """Backend built on Python's native ``int``."""

    zero = 0
    one = 1

    def coerce(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        raise TypeError(f"expected an integer, got {type(value)!r}")

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divmod(self, a: int, b: int) -> Tuple[int, int]:
        return divmod(a, b)

    def gcd(self, a: int, b: int) -> int:
        # Always non-negative; gcd(0, 0) == 0.
        return math.gcd(a, b)

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def negate(self, a: int) -> int:
        return -a

    def to_float(self, a: int) -> float:
        try:
            return float(a)
        except OverflowError:
            return math.inf if a > 0 else -math.inf

    def to_str(self, a: int) -> str:
        return str(a)

    def from_str(self, text: str) -> int:
        return int(text, 10)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DEFAULT_BACKEND = PythonIntegerBackend()

__all__ = ["IntegerBackend", "PythonIntegerBackend", "DEFAULT_BACKEND"]
