"""Exact rational numbers over unbounded integers, with NumPy interoperability."""
from __future__ import annotations

import enum
import math
import numbers
import operator
import re
from fractions import Fraction
from typing import Any, Callable, Optional, Union

from .backend import DEFAULT_BACKEND, IntegerBackend
from .exceptions import DivisionByZero, InvalidDenominator, InvalidFormat

try:  # NumPy is optional but recommended for array workflows.
    import numpy as np  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - optional dependency may be absent.
    np = None  # type: ignore

NumberLike = Union["Rational", Fraction, numbers.Integral]

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def _ensure_int(value: Any, *, name: str, backend: IntegerBackend) -> Any:
    """Convert *value* to a backend integer when it represents an integer."""
    if np is not None and isinstance(value, np.generic):
        value = value.item()
    try:
        return backend.coerce(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value)!r}") from None


def _parse_integer(token: str, text: str, backend: IntegerBackend) -> Any:
    if _INTEGER_TOKEN.fullmatch(token) is None:
        raise InvalidFormat(f"invalid integer {token!r} in {text!r}")
    return backend.from_str(token)


class Ordering(enum.IntEnum):
    """Result of :meth:`Rational.compare`."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Rational:
    """An immutable numerator/denominator pair.

    Values are *not* reduced on construction: ``Rational(2, -4)`` keeps both
    components as given until :meth:`simplify` is called. Arithmetic results
    are always simplified; the sign moves onto the numerator only when the
    value is formatted as text.

    Equality (``==`` and :meth:`equals`) compares the floating-point ratios
    of the simplified components, so distinct values whose components are too
    large for a ``float`` may compare unequal. Use :meth:`exact_equals` or
    :meth:`compare` for an exact answer.
    """

    __slots__ = ("_numerator", "_denominator", "_backend")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
        *,
        backend: Optional[IntegerBackend] = None,
    ) -> None:
        if backend is None:
            backend = DEFAULT_BACKEND
        num = _ensure_int(numerator, name="numerator", backend=backend)
        den = _ensure_int(denominator, name="denominator", backend=backend)
        if backend.compare(den, backend.zero) == 0:
            raise InvalidDenominator("denominator must be non-zero")

        self._numerator = num
        self._denominator = den
        self._backend = backend

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_str(cls, text: str, *, backend: Optional[IntegerBackend] = None) -> "Rational":
        """Parse ``"a"`` or ``"a/b"`` into an unsimplified :class:`Rational`.

        Each part is an optional sign followed by decimal digits. A zero
        denominator raises :class:`InvalidDenominator`.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text)!r}")
        if backend is None:
            backend = DEFAULT_BACKEND

        parts = text.split("/")
        if len(parts) == 1:
            num = _parse_integer(parts[0], text, backend)
            den = backend.one
        elif len(parts) == 2:
            num = _parse_integer(parts[0], text, backend)
            den = _parse_integer(parts[1], text, backend)
        else:
            raise InvalidFormat(f"invalid rational {text!r}: expected 'a' or 'a/b'")
        return cls(num, den, backend=backend)

    @classmethod
    def from_fraction(
        cls, value: Fraction, *, backend: Optional[IntegerBackend] = None
    ) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator, backend=backend)

    @classmethod
    def rationalize(
        cls, value: NumberLike, *, backend: Optional[IntegerBackend] = None
    ) -> "Rational":
        """Coerce an integer-like or fractional value into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value, backend=backend)
        if np is not None and isinstance(value, np.generic):
            return cls.rationalize(value.item(), backend=backend)
        if isinstance(value, numbers.Integral):
            return cls(value, 1, backend=backend)
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> Any:
        return self._numerator

    @property
    def denominator(self) -> Any:
        return self._denominator

    @property
    def backend(self) -> IntegerBackend:
        return self._backend

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(int(self._numerator), int(self._denominator))

    def simplify(self) -> "Rational":
        """Return this value divided through by ``gcd(|numerator|, |denominator|)``.

        The signs of both components are preserved, so a negative denominator
        stays negative.
        """
        backend = self._backend
        gcd = backend.gcd(self._numerator, self._denominator)
        if backend.compare(gcd, backend.zero) == 0:
            return Rational(self._numerator, self._denominator, backend=backend)
        num, _ = backend.divmod(self._numerator, gcd)
        den, _ = backend.divmod(self._denominator, gcd)
        return Rational(num, den, backend=backend)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        """Correctly rounded quotient; raises OverflowError when out of float range."""
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return int(self.as_fraction())

    def __bool__(self) -> bool:
        return self._backend.compare(self._numerator, self._backend.zero) != 0

    # ------------------------------------------------------------------
    # Representation
    def format(self) -> str:
        """Return the canonical text form: ``"n"`` for whole values, else ``"n/d"``."""
        backend = self._backend
        num, den = self._numerator, self._denominator
        quotient, remainder = backend.divmod(num, den)
        if (
            backend.compare(den, backend.one) == 0
            or backend.compare(remainder, backend.zero) == 0
        ):
            return backend.to_str(quotient)

        simplified = self.simplify()
        num, den = simplified._numerator, simplified._denominator
        if backend.compare(den, backend.zero) < 0:
            num, den = backend.negate(num), backend.negate(den)
        return f"{backend.to_str(num)}/{backend.to_str(den)}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        backend = self._backend
        return f"Rational({backend.to_str(self._numerator)}, {backend.to_str(self._denominator)})"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            value = float(self)
        except OverflowError:
            # Out of float range: exact text is the only faithful rendering.
            return str(self)
        try:
            return format(value, format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return Rational.from_fraction(value, backend=self._backend)
        if np is not None and isinstance(value, np.generic):  # NumPy scalars
            return self._coerce_scalar(value.item())
        if isinstance(value, numbers.Integral):
            return Rational(value, 1, backend=self._backend)
        raise TypeError(f"Cannot interpret {type(value)!r} as Rational")

    def _binary_operation(self, other: Any, op: Callable[["Rational", "Rational"], Any]):
        if np is not None and isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        other_rat = self._coerce_scalar(other)
        return op(self, other_rat)

    def _reflected_operation(self, other: Any, op: Callable[["Rational", "Rational"], Any]):
        if np is not None and isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        return op(self._coerce_scalar(other), self)

    @staticmethod
    def _reduced(a: "Rational", num: Any, den: Any) -> "Rational":
        return Rational(num, den, backend=a._backend).simplify()

    @staticmethod
    def _add(a: "Rational", b: "Rational") -> "Rational":
        be = a._backend
        return Rational._reduced(
            a,
            be.add(
                be.multiply(a._numerator, b._denominator),
                be.multiply(a._denominator, b._numerator),
            ),
            be.multiply(a._denominator, b._denominator),
        )

    @staticmethod
    def _sub(a: "Rational", b: "Rational") -> "Rational":
        be = a._backend
        return Rational._reduced(
            a,
            be.subtract(
                be.multiply(a._numerator, b._denominator),
                be.multiply(a._denominator, b._numerator),
            ),
            be.multiply(a._denominator, b._denominator),
        )

    @staticmethod
    def _mul(a: "Rational", b: "Rational") -> "Rational":
        be = a._backend
        return Rational._reduced(
            a,
            be.multiply(a._numerator, b._numerator),
            be.multiply(a._denominator, b._denominator),
        )

    @staticmethod
    def _truediv(a: "Rational", b: "Rational") -> "Rational":
        be = a._backend
        if be.compare(b._numerator, be.zero) == 0:
            raise DivisionByZero("division by zero")
        return Rational._reduced(
            a,
            be.multiply(a._numerator, b._denominator),
            be.multiply(a._denominator, b._numerator),
        )

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._add)

    def subtract(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._sub)

    def multiply(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._mul)

    def divide(self, other: Any) -> Any:
        return self._binary_operation(other, Rational._truediv)

    def negate(self) -> "Rational":
        """Return ``(-numerator, denominator)`` without simplifying."""
        return Rational(
            self._backend.negate(self._numerator),
            self._denominator,
            backend=self._backend,
        )

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __neg__ = negate

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._add)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._sub)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._mul)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, Rational._truediv)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        backend = self._backend
        num, den = self._numerator, self._denominator
        if backend.compare(num, backend.zero) < 0:
            num = backend.negate(num)
        if backend.compare(den, backend.zero) < 0:
            den = backend.negate(den)
        return Rational(num, den, backend=backend)

    # ------------------------------------------------------------------
    # Comparisons
    def compare(self, other: Any) -> Ordering:
        """Order two values by cross-multiplication.

        Only meaningful when both denominators are positive; a negative
        denominator flips the result.
        """
        other_rat = self._coerce_scalar(other)
        backend = self._backend
        return Ordering(
            backend.compare(
                backend.multiply(self._numerator, other_rat._denominator),
                backend.multiply(self._denominator, other_rat._numerator),
            )
        )

    def _compare(self, other: Any, op) -> bool:
        return op(self.compare(other), Ordering.EQUAL)

    def _float_ratio(self) -> float:
        backend = self._backend
        return backend.to_float(self._numerator) / backend.to_float(self._denominator)

    def equals(self, other: Any) -> bool:
        """Compare the simplified values as ``float`` ratios."""
        other_rat = self._coerce_scalar(other)
        return self.simplify()._float_ratio() == other_rat.simplify()._float_ratio()

    def exact_equals(self, other: Any) -> bool:
        """Return ``True`` when both values denote the same fraction."""
        return self.compare(other) is Ordering.EQUAL

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        try:
            return self.equals(other)
        except TypeError:
            return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Equal values share a float ratio.
        simplified = self.simplify()
        ratio = simplified._float_ratio()
        if math.isnan(ratio):
            # A NaN ratio only equals the same object.
            return hash((simplified._numerator, simplified._denominator))
        return hash(ratio)

    # ------------------------------------------------------------------
    # NumPy interoperability
    if np is not None:
        _UFUNC_DISPATCH = {
            np.add: operator.add,
            np.subtract: operator.sub,
            np.multiply: operator.mul,
            np.divide: operator.truediv,
            np.true_divide: operator.truediv,
            np.negative: operator.neg,
            np.positive: operator.pos,
            np.absolute: abs,
        }
    else:  # pragma: no cover - executed when NumPy unavailable
        _UFUNC_DISPATCH = {}

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        """Apply arithmetic ufuncs elementwise, yielding object arrays of Rational."""
        if np is None:  # pragma: no cover
            return NotImplemented
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._coerce_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


class RationalRange:
    """Closed interval ``[start, end]`` supporting ``value in range``."""

    __slots__ = ("start", "end")

    def __init__(self, start: NumberLike, end: NumberLike) -> None:
        self.start = Rational.rationalize(start)
        self.end = Rational.rationalize(end)

    def __contains__(self, value: Any) -> bool:
        try:
            return self.start <= value <= self.end
        except TypeError:
            return False

    def is_empty(self) -> bool:
        return self.start > self.end

    def __repr__(self) -> str:
        return f"RationalRange({self.start!r}, {self.end!r})"

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


def div_by(
    numerator: Union[int, numbers.Integral],
    denominator: Union[int, numbers.Integral],
    *,
    backend: Optional[IntegerBackend] = None,
) -> Rational:
    """Build ``numerator/denominator`` without simplifying."""
    return Rational(numerator, denominator, backend=backend)


def parse(text: str, *, backend: Optional[IntegerBackend] = None) -> Rational:
    """Public helper for :meth:`Rational.from_str`."""

    return Rational.from_str(text, backend=backend)


def rationalize(value: NumberLike, *, backend: Optional[IntegerBackend] = None) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value, backend=backend)


def as_rational_array(
    values: Any,
    *,
    backend: Optional[IntegerBackend] = None,
    copy: bool = True,
) -> "np.ndarray":
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable of integer-like entries or an existing
    NumPy array. When ``copy`` is ``False`` and ``values`` is already an
    object array of :class:`Rational`, it is returned unchanged.
    """

    if np is None:
        raise RuntimeError("NumPy is required to construct Rational arrays")

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype != object:
            array = array.astype(object)
        if all(isinstance(item, Rational) for item in array.flat):
            return array
        vectorised = np.vectorize(
            lambda item: Rational.rationalize(item, backend=backend),
            otypes=[object],
        )
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        coerced = [Rational.rationalize(item, backend=backend) for item in values]
        array = np.empty(len(coerced), dtype=object)
        array[:] = coerced
        return array

    return as_rational_array(list(values), backend=backend, copy=copy)


def zeros(length: int, *, backend: Optional[IntegerBackend] = None) -> "np.ndarray":
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_rational_array(
        [Rational(0, 1, backend=backend) for _ in range(length)],
        copy=True,
    )


def zeros_like(values: Any, *, backend: Optional[IntegerBackend] = None) -> "np.ndarray":
    """Return a zero-filled array that matches the shape of ``values``."""

    array = as_rational_array(values, backend=backend)
    flat = np.empty(array.size, dtype=object)
    flat[:] = [Rational(0, 1, backend=backend) for _ in range(array.size)]
    return flat.reshape(array.shape)


__all__ = [
    "Ordering",
    "Rational",
    "RationalRange",
    "div_by",
    "parse",
    "rationalize",
    "as_rational_array",
    "zeros",
    "zeros_like",
]
