# src/stayrate/application/availability.py
"""
Availability - Allocation Pool Counter Checks

Plain counter arithmetic over allocation pools. This is not a reservation
system: nothing is held or decremented, callers check before pricing.

Files that USE this module:
- stayrate.application.quote_service (QuoteService.check_availability)
- tests.test_availability (unit tests)

Files that this module USES:
- stayrate.domain.models (AllocationPool, Availability)
"""
from __future__ import annotations

from typing import Iterable

from stayrate.domain.errors import InvalidPricingInputError
from stayrate.domain.models import AllocationPool, Availability
from stayrate.shared.validators import is_count


def check_availability(pool: AllocationPool, quantity: int) -> Availability:
    """
    Check whether quantity spots can be booked from a pool.

    Args:
        pool: Allocation pool counters
        quantity: Requested rooms or tickets

    Returns:
        Availability with allocated capacity, free spots and the verdict
    """
    if not is_count(quantity, 1):
        raise InvalidPricingInputError(f"requested quantity must be a positive integer, got {quantity!r}")
    return Availability(
        allocated=pool.total_capacity,
        available=pool.available_spots,
        can_book=pool.available_spots >= quantity,
    )


def combined_pool(pool_id: str, pools: Iterable[AllocationPool]) -> AllocationPool:
    """Merge several supplier allocations feeding the same pool into one counter."""
    pools = list(pools)
    return AllocationPool(
        pool_id=pool_id,
        total_capacity=sum(p.total_capacity for p in pools),
        booked=sum(p.booked for p in pools),
    )
