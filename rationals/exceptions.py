"""Errors raised by the rationals package."""


class RationalError(Exception):
    """Base class for every error raised by :mod:`rationals`."""


class InvalidDenominator(RationalError, ZeroDivisionError):
    """A :class:`Rational` was constructed with a zero denominator."""


class DivisionByZero(RationalError, ZeroDivisionError):
    """Division by a :class:`Rational` whose numerator is zero."""


class InvalidFormat(RationalError, ValueError):
    """Text is not of the form ``numerator`` or ``numerator/denominator``."""


__all__ = ["RationalError", "InvalidDenominator", "DivisionByZero", "InvalidFormat"]
