# src/stayrate/app.py
"""
Application Entry Point - Pricing Simulator

This module serves as the composition root for the pricing simulator.
It wires settings, logging and the quote service, prices the preset
hotel and ticket scenarios, and prints their breakdowns.

Files that USE this module:
- stayrate-sim console script (pyproject.toml entry point)
- tests.test_app (scenario smoke tests)

Files that this module USES:
- stayrate.shared.logging_conf (setup_logging for logging configuration)
- stayrate.config (settings for currency, decimals and logging)
- stayrate.application.quote_service (QuoteService for pricing)
- stayrate.adapters.formatting.formatter (format_breakdown for output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from dataclasses import dataclass  # Scenario records
from datetime import date  # Scenario dates
from typing import Callable, List  # Type hints

from stayrate.adapters.formatting.formatter import format_breakdown  # Text rendering of breakdowns
from stayrate.application.quote_service import QuoteService  # Stay and ticket pricing use cases
from stayrate.domain.enums import BOARD_LABELS, AgeBand, BoardType, Channel, FeeMode, FeePayable
from stayrate.domain.errors import PricingError
from stayrate.domain.models import (
    ContractEconomics,
    Fee,
    PartyComposition,
    PriceBreakdown,
    RateRecord,
    StayRequest,
    TicketRequest,
)
from stayrate.shared.logging_conf import setup_logging  # Configure logging with file rotation


@dataclass(frozen=True)
class Scenario:
    """A named simulator preset."""
    name: str
    description: str
    unit_label: str
    run: Callable[[QuoteService], PriceBreakdown]


def hotel_rates(currency: str) -> List[RateRecord]:
    """Deluxe room rates by occupancy: low season up to 15 March, high season after."""
    return [
        RateRecord(
            category_id="deluxe",
            rate_id="deluxe-low",
            base_rate=100.0,
            currency=currency,
            valid_from=date(2026, 1, 1),
            valid_to=date(2026, 3, 15),
            occupancy_prices={"single": 85.0, "double": 100.0, "triple": 125.0},
        ),
        RateRecord(
            category_id="deluxe",
            rate_id="deluxe-high",
            base_rate=150.0,
            currency=currency,
            valid_from=date(2026, 3, 15),
            valid_to=date(2026, 6, 1),
            occupancy_prices={"single": 130.0, "double": 150.0, "triple": 185.0},
        ),
    ]


def hotel_economics(currency: str) -> ContractEconomics:
    return ContractEconomics(
        supplier_commission_rate=0.10,
        supplier_vat_rate=0.05,
        customer_vat_rate=5,
        default_markup_percentage=0.6,
        fees=(
            Fee("city_tax", FeeMode.PER_PERSON_PER_NIGHT, 10.0, FeePayable.US),
            Fee("resort_fee", FeeMode.PER_ROOM_PER_NIGHT, 20.0, FeePayable.PROPERTY),
        ),
        room_tax_rate=7,  # collected by the hotel
        additional_person_charge=40.0,
        max_occupancy=4,
        currency=currency,
    )


def ticket_rates(currency: str) -> List[RateRecord]:
    return [
        RateRecord(
            category_id="grandstand",
            rate_id="grandstand-2026",
            base_rate=100.0,
            currency=currency,
            valid_from=date(2026, 1, 1),
            valid_to=date(2027, 1, 1),
        ),
    ]


def ticket_economics(currency: str) -> ContractEconomics:
    return ContractEconomics(
        supplier_commission_rate=0.15,
        supplier_vat_rate=0.05,
        customer_vat_rate=5,
        default_markup_percentage=0.0,
        service_fee_per_unit=2.5,
        currency=currency,
    )


def build_scenarios(currency: str) -> List[Scenario]:
    """Preset scenarios shown by the hotel and ticket simulators."""
    stay_rates = hotel_rates(currency)
    stay_terms = hotel_economics(currency)
    event_rates = ticket_rates(currency)
    event_terms = ticket_economics(currency)
    event_day = date(2026, 4, 18)

    def stay(start, end, adults, children, board, group, early_bird):
        request = StayRequest(
            start_date=start,
            end_date=end,
            party=PartyComposition(adults=adults, children=children),
            channel=Channel.WEB,
            board=board,
            group_discount_pct=group,
            early_bird_discount_pct=early_bird,
        )
        return lambda service: service.quote_stay(request, stay_rates, stay_terms)

    def tickets(quantity, age_band, channel, group):
        request = TicketRequest(
            event_date=event_day,
            quantity=quantity,
            age_band=age_band,
            channel=channel,
            group_discount_pct=group,
            early_bird_discount_pct=0,
        )
        return lambda service: service.quote_tickets(request, event_rates, event_terms)

    return [
        Scenario("Weekend Getaway",
                 f"2 nights, 2 adults, {BOARD_LABELS[BoardType.BED_AND_BREAKFAST]}", "night",
                 stay(date(2026, 2, 6), date(2026, 2, 8), 2, 0, BoardType.BED_AND_BREAKFAST, 0, 0)),
        Scenario("Family Holiday",
                 f"7 nights across seasons, 2 adults, 2 children, {BOARD_LABELS[BoardType.HALF_BOARD]}",
                 "night",
                 stay(date(2026, 3, 12), date(2026, 3, 19), 2, 2, BoardType.HALF_BOARD, 10, 5)),
        Scenario("Single Adult", "Web channel, 1 adult ticket", "ticket",
                 tickets(1, AgeBand.ADULT, Channel.WEB, 0)),
        Scenario("Group Booking", "B2B, 10 adult tickets, 5% discount", "ticket",
                 tickets(10, AgeBand.ADULT, Channel.B2B, 5)),
        Scenario("Reseller Child", "Reseller channel, 1 child ticket", "ticket",
                 tickets(1, AgeBand.CHILD, Channel.RESELLER, 0)),
    ]


def main() -> int:
    """
    Run the pricing simulator over all preset scenarios.

    Returns:
        0 if every scenario priced, 1 if any scenario failed
    """
    # Import settings here so tests can patch the environment first
    from stayrate.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    service = QuoteService()
    scenarios = build_scenarios(settings.default_currency)
    failures = 0
    for scenario in scenarios:
        try:
            breakdown = scenario.run(service)
        except PricingError as e:
            failures += 1
            logger.error("Scenario %s failed: %s (type: %s)", scenario.name, e, type(e).__name__)
            continue
        print(format_breakdown(
            breakdown,
            decimals=settings.display_decimals,
            title=f"== {scenario.name}: {scenario.description}",
            unit_label=scenario.unit_label,
        ))
        print()

    if failures:
        logger.error("%d scenario(s) failed", failures)
        return 1
    logger.info("Priced %d scenarios", len(scenarios))
    return 0


if __name__ == "__main__":
    sys.exit(main())
