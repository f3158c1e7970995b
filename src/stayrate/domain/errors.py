# src/stayrate/domain/errors.py
"""
Domain Errors - Pricing Exceptions

This module defines the typed failures the pricing engine raises.
None of them are retried or recovered with default values: pricing is
deterministic, so the caller must fix the input.

Files that USE this module:
- stayrate.domain.models (InvalidPricingInputError from value object validation)
- stayrate.domain.enums (UnknownEnumValueError from enum parsing)
- stayrate.application.* (all engine components raise these)
- tests.* (tests assert on these)

Files that this module USES:
- None (pure domain layer)
"""
from __future__ import annotations

from datetime import date
from typing import Iterable


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class PricingError(DomainError):
    """Base exception for pricing engine failures."""
    pass


class NoApplicableRateError(PricingError):
    """Raised when no active rate record covers a date of the stay."""

    def __init__(self, on_date: date, category_id: str | None = None):
        self.date = on_date
        self.category_id = category_id
        scope = f" for category {category_id}" if category_id else ""
        super().__init__(f"No applicable rate{scope} on {on_date.isoformat()}")


class InvalidPricingInputError(PricingError):
    """Raised when a numeric input is negative, out of range or nonsensical."""
    pass


class UnknownEnumValueError(PricingError):
    """Raised when a channel, age band, fee mode or board key is not recognised."""

    def __init__(self, kind: str, value: object):
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown {kind}: {value!r}")


class AmbiguousRateSelectionError(PricingError):
    """Raised when several equally specific active rates cover the same date.

    rate_ids holds the label of each tied record (its rate_id, else its category).
    """

    def __init__(self, on_date: date, rate_ids: Iterable[str]):
        self.date = on_date
        self.rate_ids = tuple(rate_ids)
        ids = ", ".join(str(r) for r in self.rate_ids)
        super().__init__(
            f"Ambiguous rate selection on {on_date.isoformat()}: {ids}"
        )
