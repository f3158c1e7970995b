# src/stayrate/application/quote_service.py
"""
Quote Service - Stay and Ticket Pricing Use Cases

This module wires the engine pipeline together for the pricing panels:
resolve rate periods, price each period, aggregate into a PriceBreakdown.
Pricing failures are logged and re-raised unchanged; nothing is retried
or replaced with a default price.

Files that USE this module:
- stayrate.app (simulator scenarios)
- tests.test_quote_service (unit tests)

Files that this module USES:
- stayrate.application.resolver (resolve_periods, resolve_single)
- stayrate.application.economics (price_period)
- stayrate.application.aggregator (aggregate)
- stayrate.application.policies (gross_rate)
- stayrate.application.availability (check_availability)
- stayrate.application.profit (booking_profit, best_supplier_for_pool)
- stayrate.domain.models (requests, economics, breakdowns)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging quotes and failures
from typing import Iterable, Optional  # Type hints for iterables and optional values

from stayrate.application.aggregator import aggregate
from stayrate.application.availability import check_availability
from stayrate.application.economics import price_period
from stayrate.application.policies import gross_rate
from stayrate.application.profit import best_supplier_for_pool, booking_profit
from stayrate.application.resolver import resolve_periods, resolve_single
from stayrate.domain.enums import BOARD_COSTS, Channel
from stayrate.domain.errors import InvalidPricingInputError, PricingError
from stayrate.domain.models import (
    AllocationPool,
    Availability,
    BookingProfit,
    ContractEconomics,
    PolicyQuote,
    PriceBreakdown,
    PricingPolicy,
    RatePeriod,
    RateRecord,
    StayRequest,
    SupplierAllocation,
    TicketRequest,
)

logger = logging.getLogger(__name__)

STANDARD_OCCUPANCY = 2  # adults included in the room rate


def _check_currency(periods: Iterable[RatePeriod], economics: ContractEconomics) -> None:
    if economics.currency is None:
        return
    for period in periods:
        if period.rate.currency != economics.currency:
            raise InvalidPricingInputError(
                f"rate {period.rate.label} is in {period.rate.currency}, "
                f"contract is in {economics.currency}"
            )


class QuoteService:
    """
    High-level pricing service for stays, tickets, offers and supplier pools.
    Holds no state between calls; one instance can serve any number of threads.
    """

    def quote_stay(
        self,
        request: StayRequest,
        rates: Iterable[RateRecord],
        economics: ContractEconomics,
    ) -> PriceBreakdown:
        """
        Price a multi-night stay.

        Booking-level fees (per_person, fixed) are charged on the first
        period only. The add-on cost per night is the board cost plus the
        additional person charge for every adult beyond two. Rates carrying
        occupancy prices are priced at the occupancy matching the adults,
        falling back in the fixed occupancy order.

        Args:
            request: Stay request
            rates: Rate records for the booked category
            economics: Contract economics

        Returns:
            PriceBreakdown for the whole stay

        Raises:
            PricingError: Any typed pricing failure (logged, then re-raised)
        """
        try:
            if economics.max_occupancy is not None and request.party.adults > economics.max_occupancy:
                raise InvalidPricingInputError(
                    f"maximum occupancy exceeded: max {economics.max_occupancy}, "
                    f"requested {request.party.adults}"
                )
            periods = resolve_periods(
                request.start_date, request.end_date, rates, request.selected_rate_ids
            )
            _check_currency(periods, economics)

            extra_adults = max(request.party.adults - STANDARD_OCCUPANCY, 0)
            add_on_cost = BOARD_COSTS[request.board] + extra_adults * economics.additional_person_charge

            prices = [
                price_period(
                    period,
                    economics,
                    request.channel,
                    request.party,
                    request.early_bird_discount_pct,
                    request.group_discount_pct,
                    add_on_cost=add_on_cost,
                    include_booking_fees=(index == 0),
                )
                for index, period in enumerate(periods)
            ]
            breakdown = aggregate(prices)
        except PricingError as e:
            logger.warning(
                "Stay quote %s -> %s failed (%s): %s",
                request.start_date, request.end_date, type(e).__name__, e,
            )
            raise

        logger.info(
            "Priced stay %s -> %s: %d nights over %d periods, channel=%s, total=%.2f %s",
            request.start_date,
            request.end_date,
            breakdown.nights_or_units,
            len(breakdown.periods),
            request.channel.value,
            breakdown.total,
            breakdown.currency,
        )
        return breakdown

    def quote_tickets(
        self,
        request: TicketRequest,
        rates: Iterable[RateRecord],
        economics: ContractEconomics,
    ) -> PriceBreakdown:
        """
        Price quantity tickets of one age band for an event date.

        Args:
            request: Ticket request
            rates: Rate records for the ticket category
            economics: Contract economics (service_fee_per_unit is per ticket)

        Returns:
            PriceBreakdown for all tickets

        Raises:
            PricingError: Any typed pricing failure (logged, then re-raised)
        """
        try:
            period = resolve_single(
                request.event_date, rates, request.quantity, request.selected_rate_ids
            )
            _check_currency([period], economics)
            price = price_period(
                period,
                economics,
                request.channel,
                request.party,
                request.early_bird_discount_pct,
                request.group_discount_pct,
                age_band=request.age_band,
            )
            breakdown = aggregate([price])
        except PricingError as e:
            logger.warning(
                "Ticket quote for %s failed (%s): %s",
                request.event_date, type(e).__name__, e,
            )
            raise

        logger.info(
            "Priced %d %s ticket(s) for %s, channel=%s, total=%.2f %s",
            request.quantity,
            request.age_band.value,
            request.event_date,
            request.channel.value,
            breakdown.total,
            breakdown.currency,
        )
        return breakdown

    def offer_gross_rate(
        self,
        base_net: float,
        policies: Iterable[PricingPolicy],
        channel: Channel,
        offer_id: Optional[str] = None,
    ) -> PolicyQuote:
        """Gross rate of an offer under its most specific pricing policy."""
        quote = gross_rate(base_net, policies, channel, offer_id)
        logger.debug(
            "Offer %s on %s: strategy=%s gross=%.2f",
            offer_id, channel, quote.strategy, quote.gross_rate,
        )
        return quote

    def check_availability(self, pool: AllocationPool, quantity: int) -> Availability:
        """Counter check of a pool before pricing; see availability.check_availability."""
        availability = check_availability(pool, quantity)
        if not availability.can_book:
            logger.info(
                "Pool %s cannot take %d: %d available",
                pool.pool_id, quantity, availability.available,
            )
        return availability

    def booking_profit(self, selling_price: float, cost_per_unit: float, quantity: int = 1) -> BookingProfit:
        """Cost, revenue and margin of a booking; see profit.booking_profit."""
        return booking_profit(selling_price, cost_per_unit, quantity)

    def best_supplier(
        self,
        pool_id: str,
        allocations: Iterable[SupplierAllocation],
    ) -> Optional[SupplierAllocation]:
        """Cheapest priced supplier feeding a pool, or None."""
        supplier = best_supplier_for_pool(pool_id, allocations)
        if supplier is None:
            logger.info("Pool %s has no priced supplier allocation", pool_id)
        return supplier


# Global quote service instance
quote_service = QuoteService()
