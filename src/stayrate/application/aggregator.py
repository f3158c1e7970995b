# src/stayrate/application/aggregator.py
"""
Quote Aggregator - Sum Period Prices into a PriceBreakdown

This module folds per-period prices into the stay-level (or ticket-level)
breakdown. Totals are always sums of the per-period figures; the
weighted-average base rate is reported for display and never used to
recompute anything.

Files that USE this module:
- stayrate.application.quote_service (builds the final breakdown)
- tests.test_aggregator (unit tests)

Files that this module USES:
- stayrate.domain.models (PeriodPrice, PriceBreakdown, TaxesAndFees, SupplierSide)
"""
from __future__ import annotations

from typing import Callable, Sequence

from stayrate.domain.errors import InvalidPricingInputError
from stayrate.domain.models import (
    PeriodPrice,
    PriceBreakdown,
    SupplierSide,
    TaxesAndFees,
)


def _total(prices: Sequence[PeriodPrice], field: Callable[[PeriodPrice], float]) -> float:
    return sum((field(p) for p in prices), 0.0)


def _weighted(prices: Sequence[PeriodPrice], field: Callable[[PeriodPrice], float], units: int) -> float:
    return _total(prices, lambda p: field(p) * p.nights_or_units) / units


def aggregate(period_prices: Sequence[PeriodPrice]) -> PriceBreakdown:
    """
    Aggregate period prices into a PriceBreakdown.

    Args:
        period_prices: Priced periods of one quote, in stay order

    Returns:
        PriceBreakdown with summed totals and weighted display rates

    Raises:
        InvalidPricingInputError: If there are no periods, no units, or
            the periods are priced in different currencies
    """
    prices = tuple(period_prices)
    if not prices:
        raise InvalidPricingInputError("cannot aggregate an empty list of period prices")

    currencies = {p.currency for p in prices}
    if len(currencies) > 1:
        raise InvalidPricingInputError(
            f"periods are priced in mixed currencies: {sorted(currencies)}"
        )

    units = sum(p.nights_or_units for p in prices)
    if units <= 0:
        raise InvalidPricingInputError("periods cover no nights or units")

    subtotal = _total(prices, lambda p: p.period_subtotal)
    commission = _total(prices, lambda p: p.commission)
    supplier_vat = _total(prices, lambda p: p.supplier_vat)
    total = _total(prices, lambda p: p.period_total)

    taxes_and_fees = TaxesAndFees(
        city_tax=_total(prices, lambda p: p.city_tax),
        resort_fee=_total(prices, lambda p: p.resort_fee),
        room_tax=_total(prices, lambda p: p.room_tax),
        resort_fee_tax=_total(prices, lambda p: p.resort_fee_tax),
        customer_vat=_total(prices, lambda p: p.customer_vat),
        service_fees=_total(prices, lambda p: p.service_fees),
        fees_included=_total(prices, lambda p: p.fees_included),
        fees_at_property=_total(prices, lambda p: p.fees_at_property),
    )

    return PriceBreakdown(
        base_rate=_weighted(prices, lambda p: p.base_rate, units),
        board_or_add_on_cost=_weighted(prices, lambda p: p.add_on_cost, units),
        marked_up_rate=_weighted(prices, lambda p: p.marked_up_rate, units),
        channel_adjusted_rate=_weighted(prices, lambda p: p.channel_adjusted_rate, units),
        after_early_bird=_weighted(prices, lambda p: p.after_early_bird, units),
        after_group_discount=_weighted(prices, lambda p: p.after_group_discount, units),
        subtotal=subtotal,
        taxes_and_fees=taxes_and_fees,
        supplier_side=SupplierSide(commission=commission, supplier_vat=supplier_vat),
        total=total,
        margin_estimate=total - (commission + supplier_vat),
        nights_or_units=units,
        currency=currencies.pop(),
        periods=prices,
    )
