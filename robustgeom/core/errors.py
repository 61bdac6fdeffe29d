"""Exception types raised by robustgeom."""
from __future__ import annotations


class GeometryError(Exception):
    """Base class for recoverable geometry failures."""


class InsufficientInputError(GeometryError, ValueError):
    """Raised when an algorithm receives too few points to do anything (e.g. an empty hull input)."""


class ContractViolation(AssertionError):
    """A caller broke a documented precondition.

    Raised explicitly instead of via ``assert`` so the check survives ``python -O``.
    """


__all__ = ['GeometryError', 'InsufficientInputError', 'ContractViolation']
