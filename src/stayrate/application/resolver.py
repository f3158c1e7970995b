# src/stayrate/application/resolver.py
"""
Rate Period Resolver - Split a Stay into Rate Periods

This module partitions a stay's nights into contiguous periods, each
governed by exactly one rate record. Candidates for a night are the active
records whose half-open window contains the night and whose weekdays
include it.

Selection among several candidates for the same night:
1. a candidate named in selected_rate_ids wins if exactly one is named
2. otherwise the narrowest validity window wins
3. a tie on the narrowest width raises AmbiguousRateSelectionError

Files that USE this module:
- stayrate.application.quote_service (resolves stays and ticket dates)
- tests.test_resolver (unit tests)

Files that this module USES:
- stayrate.domain.models (RateRecord, RatePeriod)
- stayrate.domain.errors (NoApplicableRateError, AmbiguousRateSelectionError)
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from stayrate.domain.errors import (
    AmbiguousRateSelectionError,
    InvalidPricingInputError,
    NoApplicableRateError,
)
from stayrate.domain.models import RatePeriod, RateRecord

ONE_DAY = timedelta(days=1)


def select_rate(
    on_date: date,
    candidate_rates: Iterable[RateRecord],
    selected_rate_ids: Sequence[str] = (),
) -> RateRecord:
    """
    Pick the single rate record that prices on_date.

    Args:
        on_date: Night (or event date) being priced
        candidate_rates: Rate records for one category
        selected_rate_ids: Rate ids the caller prefers when windows overlap

    Returns:
        The applicable RateRecord

    Raises:
        NoApplicableRateError: If no active record covers on_date
        AmbiguousRateSelectionError: If the tie-break cannot pick one record
    """
    candidates = [rate for rate in candidate_rates if rate.covers(on_date)]
    if not candidates:
        raise NoApplicableRateError(on_date)
    if len(candidates) == 1:
        return candidates[0]

    if selected_rate_ids:
        chosen = [rate for rate in candidates if rate.rate_id in selected_rate_ids]
        if len(chosen) == 1:
            return chosen[0]
        if len(chosen) > 1:
            raise AmbiguousRateSelectionError(on_date, [r.label for r in chosen])

    narrowest = min(rate.window_days for rate in candidates)
    best = [rate for rate in candidates if rate.window_days == narrowest]
    if len(best) > 1:
        raise AmbiguousRateSelectionError(on_date, [r.label for r in best])
    return best[0]


def resolve_periods(
    start: date,
    end: date,
    candidate_rates: Iterable[RateRecord],
    selected_rate_ids: Sequence[str] = (),
) -> list[RatePeriod]:
    """
    Partition the nights of [start, end) into rate periods.

    Walks the stay night by night and extends the current period while the
    same record keeps applying.

    Args:
        start: Check-in date (first night)
        end: Check-out date (exclusive)
        candidate_rates: Rate records for one category
        selected_rate_ids: Rate ids the caller prefers when windows overlap

    Returns:
        Ordered, contiguous periods whose nights sum to (end - start).days

    Raises:
        InvalidPricingInputError: If start is not before end
        NoApplicableRateError: On the first night no record covers
        AmbiguousRateSelectionError: If a night has no deterministic winner
    """
    if not start < end:
        raise InvalidPricingInputError("stay start must be before stay end")

    rates = list(candidate_rates)
    periods: list[RatePeriod] = []
    current_rate: Optional[RateRecord] = None
    period_start = start

    night = start
    while night < end:
        rate = select_rate(night, rates, selected_rate_ids)
        if current_rate is not None and rate != current_rate:
            periods.append(_close_period(period_start, night, current_rate))
            period_start = night
        current_rate = rate
        night += ONE_DAY

    periods.append(_close_period(period_start, end, current_rate))
    return periods


def resolve_single(
    on_date: date,
    candidate_rates: Iterable[RateRecord],
    units: int,
    selected_rate_ids: Sequence[str] = (),
) -> RatePeriod:
    """
    Resolve a ticket's event date into one period of units.

    Args:
        on_date: Event date
        candidate_rates: Rate records for one ticket category
        units: Number of tickets
        selected_rate_ids: Rate ids the caller prefers when windows overlap

    Returns:
        A single RatePeriod covering on_date
    """
    if units < 1:
        raise InvalidPricingInputError("ticket quantity must be at least 1")
    rate = select_rate(on_date, candidate_rates, selected_rate_ids)
    return RatePeriod(
        start_date=on_date,
        end_date=on_date + ONE_DAY,
        nights_or_units=units,
        rate=rate,
    )


def _close_period(start: date, end: date, rate: RateRecord) -> RatePeriod:
    return RatePeriod(
        start_date=start,
        end_date=end,
        nights_or_units=(end - start).days,
        rate=rate,
    )
