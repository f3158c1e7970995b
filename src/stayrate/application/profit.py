# src/stayrate/application/profit.py
"""
Profit Helpers - Booking Profit and Supplier Choice

This module holds the supplier-side arithmetic used next to the pool
counters in availability: profit of a single booking given its selling
price and contract cost, and the cheapest priced supplier feeding a pool.

Files that USE this module:
- stayrate.application.quote_service (QuoteService.booking_profit, best_supplier)
- tests.test_profit (unit tests)

Files that this module USES:
- stayrate.domain.models (BookingProfit, SupplierAllocation)
"""
from __future__ import annotations

from typing import Iterable, Optional

from stayrate.domain.errors import InvalidPricingInputError
from stayrate.domain.models import BookingProfit, SupplierAllocation
from stayrate.shared.validators import is_count, is_non_negative


def booking_profit(selling_price: float, cost_per_unit: float, quantity: int = 1) -> BookingProfit:
    """
    Profit of a booking of quantity units.

    Args:
        selling_price: Price charged per unit
        cost_per_unit: Contract cost per unit
        quantity: Units booked (default: 1)

    Returns:
        BookingProfit; the margin is 0 when nothing is charged

    Raises:
        InvalidPricingInputError: On negative amounts or a quantity below 1
    """
    if not is_non_negative(selling_price):
        raise InvalidPricingInputError(f"selling price must be non-negative, got {selling_price!r}")
    if not is_non_negative(cost_per_unit):
        raise InvalidPricingInputError(f"cost per unit must be non-negative, got {cost_per_unit!r}")
    if not is_count(quantity, 1):
        raise InvalidPricingInputError(f"quantity must be a positive integer, got {quantity!r}")

    revenue = selling_price * quantity
    cost = cost_per_unit * quantity
    profit = revenue - cost
    return BookingProfit(
        total_cost=cost,
        total_revenue=revenue,
        total_profit=profit,
        profit_margin_pct=profit / revenue * 100 if revenue > 0 else 0.0,
    )


def best_supplier_for_pool(
    pool_id: str,
    allocations: Iterable[SupplierAllocation],
) -> Optional[SupplierAllocation]:
    """
    Cheapest priced supplier allocation feeding a pool.

    Allocations without a cost (None or 0) are never chosen; on equal
    cost the first allocation wins.

    Returns:
        The chosen allocation, or None if the pool has no priced allocation
    """
    best: Optional[SupplierAllocation] = None
    for allocation in allocations:
        if allocation.pool_id != pool_id or not allocation.cost_per_unit:
            continue
        if best is None or allocation.cost_per_unit < best.cost_per_unit:
            best = allocation
    return best
