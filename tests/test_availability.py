# tests/test_availability.py
"""
Availability Tests - Unit Tests for Allocation Pool Counters

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stayrate.application.availability (check_availability, combined_pool)
- stayrate.domain.models (AllocationPool)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from stayrate.application.availability import check_availability, combined_pool
from stayrate.domain.errors import InvalidPricingInputError
from stayrate.domain.models import AllocationPool


class TestCheckAvailability:
    def test_enough_spots(self):
        result = check_availability(AllocationPool("gp", total_capacity=20, booked=5), 15)

        assert result.allocated == 20
        assert result.available == 15
        assert result.can_book is True

    def test_not_enough_spots(self):
        result = check_availability(AllocationPool("gp", total_capacity=20, booked=18), 3)

        assert result.can_book is False

    def test_overbooked_pool_has_no_spots(self):
        pool = AllocationPool("gp", total_capacity=10, booked=12)

        assert pool.available_spots == 0
        assert pool.utilization_pct == pytest.approx(120.0)
        assert check_availability(pool, 1).can_book is False

    @pytest.mark.parametrize("quantity", [0, -1, 1.5])
    def test_invalid_quantity(self, quantity):
        with pytest.raises(InvalidPricingInputError):
            check_availability(AllocationPool("gp", total_capacity=10), quantity)


class TestCombinedPool:
    def test_sums_supplier_allocations(self):
        pool = combined_pool("shared", [
            AllocationPool("a", total_capacity=10, booked=4),
            AllocationPool("b", total_capacity=5, booked=5),
        ])

        assert pool.pool_id == "shared"
        assert pool.total_capacity == 15
        assert pool.available_spots == 6

    def test_empty_pool_utilization(self):
        assert AllocationPool("none", total_capacity=0).utilization_pct == 0.0
