"""Errors raised by tidy_agronomy.

All errors are raised immediately to the caller; nothing is retried and no
partial result is returned. Two situations are deliberately *not* errors:

- a group that never reaches a threshold is simply absent from the output
- a value a growth-stage classifier cannot compare maps to a missing label
"""

from __future__ import annotations

from collections.abc import Iterable


class TidyAgronomyError(Exception):
    """Base class for all package errors."""


class MissingColumnError(TidyAgronomyError, KeyError):
    """A referenced group-by, date, or value column is not in the table."""

    def __init__(self, missing: Iterable[str], available: Iterable[str] = ()) -> None:
        self.missing = list(missing)
        self.available = list(available)
        super().__init__(self.missing)

    def __str__(self) -> str:
        return f"Missing column(s) {self.missing}. Available columns: {self.available}"


class ColumnTypeError(TidyAgronomyError, TypeError):
    """A column (or value) is not of the numeric or datetime type required."""


class ThresholdOrderError(TidyAgronomyError, ValueError):
    """A threshold table or bound pair is not strictly ordered."""
