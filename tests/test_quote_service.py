# tests/test_quote_service.py
"""
Quote Service Tests - Unit Tests for Stay and Ticket Pricing Use Cases

This module contains unit tests for the QuoteService pipeline: multi-season
stays, occupancy prices, board and extra-adult add-ons, booking-level
fees, incidentals, occupancy and currency checks, ticket quotes, pricing
monotonicity, profit helpers and failure logging.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- stayrate.application.quote_service (QuoteService for testing)
- stayrate.domain.models (requests, rates and economics for test data)
- unittest.mock (patch for logger assertions)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from datetime import date  # Stay and event dates
from unittest.mock import patch  # Patching the module logger

from stayrate.application.quote_service import QuoteService
from stayrate.domain.enums import (
    AgeBand,
    BoardType,
    Channel,
    FeeMode,
    FeePayable,
    IncidentalsHandling,
)
from stayrate.domain.errors import InvalidPricingInputError, NoApplicableRateError
from stayrate.domain.models import (
    AllocationPool,
    ContractEconomics,
    Fee,
    PartyComposition,
    PricingPolicy,
    RateRecord,
    StayRequest,
    SupplierAllocation,
    TicketRequest,
)

RATES = [
    RateRecord(
        category_id="deluxe",
        rate_id="low",
        base_rate=100.0,
        currency="AED",
        valid_from=date(2026, 3, 1),
        valid_to=date(2026, 3, 3),
    ),
    RateRecord(
        category_id="deluxe",
        rate_id="high",
        base_rate=150.0,
        currency="AED",
        valid_from=date(2026, 3, 3),
        valid_to=date(2026, 3, 10),
    ),
]

OCCUPANCY_RATES = [
    RateRecord(
        category_id="family",
        base_rate=100.0,
        currency="AED",
        valid_from=date(2026, 1, 1),
        valid_to=date(2027, 1, 1),
        occupancy_prices={"single": 90.0, "double": 120.0, "triple": 150.0},
    ),
]

TICKET_RATES = [
    RateRecord(
        category_id="grandstand",
        base_rate=100.0,
        currency="AED",
        valid_from=date(2026, 1, 1),
        valid_to=date(2027, 1, 1),
    ),
]


def _economics(**overrides):
    terms = dict(
        supplier_commission_rate=0.0,
        supplier_vat_rate=0.0,
        customer_vat_rate=0,
        default_markup_percentage=0.0,
    )
    terms.update(overrides)
    return ContractEconomics(**terms)


def _stay(start=date(2026, 3, 1), end=date(2026, 3, 4), adults=2, children=0,
          channel=Channel.WEB, board=BoardType.ROOM_ONLY, group=0, early_bird=0):
    return StayRequest(
        start_date=start,
        end_date=end,
        party=PartyComposition(adults=adults, children=children),
        channel=channel,
        board=board,
        group_discount_pct=group,
        early_bird_discount_pct=early_bird,
    )


@pytest.fixture
def service():
    return QuoteService()


class TestQuoteStay:
    def test_stay_across_two_rate_periods(self, service):
        breakdown = service.quote_stay(_stay(), RATES, _economics())

        assert breakdown.subtotal == pytest.approx(350.0)
        assert breakdown.total == pytest.approx(350.0)
        assert breakdown.nights_or_units == 3
        assert [p.nights_or_units for p in breakdown.periods] == [2, 1]

    def test_booking_level_fee_charged_once(self, service):
        economics = _economics(fees=(Fee("admin", FeeMode.FIXED, 30.0, FeePayable.US),))

        breakdown = service.quote_stay(_stay(), RATES, economics)

        assert breakdown.taxes_and_fees.fees_included == pytest.approx(30.0)
        assert breakdown.total == pytest.approx(380.0)

    def test_board_cost_added_per_night(self, service):
        request = _stay(start=date(2026, 3, 4), end=date(2026, 3, 5), board="bb")

        breakdown = service.quote_stay(request, RATES, _economics())

        assert breakdown.board_or_add_on_cost == pytest.approx(25.0)
        assert breakdown.total == pytest.approx(175.0)

    def test_additional_person_charge_beyond_two_adults(self, service):
        request = _stay(end=date(2026, 3, 2), adults=3)

        breakdown = service.quote_stay(request, RATES, _economics(additional_person_charge=40.0))

        assert breakdown.periods[0].unit_rate == pytest.approx(140.0)

    def test_max_occupancy_exceeded(self, service):
        with pytest.raises(InvalidPricingInputError, match="maximum occupancy"):
            service.quote_stay(_stay(adults=3), RATES, _economics(max_occupancy=2))

    def test_rate_currency_must_match_contract(self, service):
        with pytest.raises(InvalidPricingInputError):
            service.quote_stay(_stay(), RATES, _economics(currency="GBP"))

    def test_idempotent(self, service):
        request = _stay(group=10, early_bird=5, board=BoardType.HALF_BOARD)
        economics = _economics(default_markup_percentage=0.6, customer_vat_rate=5)

        assert service.quote_stay(request, RATES, economics) == service.quote_stay(request, RATES, economics)

    def test_total_strictly_decreases_with_group_discount(self, service):
        economics = _economics(default_markup_percentage=0.3, customer_vat_rate=5)

        totals = [
            service.quote_stay(_stay(group=group), RATES, economics).total
            for group in (0, 10, 25, 50, 99)
        ]

        for higher, lower in zip(totals, totals[1:]):
            assert higher > lower

    def test_channel_ordering(self, service):
        def total(channel):
            return service.quote_stay(_stay(channel=channel), RATES, _economics()).total

        assert total(Channel.RESELLER) > total(Channel.WEB) > total(Channel.INTERNAL)

    def test_early_bird_applies_to_channel_adjusted_rate(self, service):
        request = _stay(end=date(2026, 3, 3), channel=Channel.B2B, early_bird=10)

        breakdown = service.quote_stay(request, RATES, _economics(default_markup_percentage=0.6))

        assert breakdown.marked_up_rate == pytest.approx(160.0)
        assert breakdown.channel_adjusted_rate == pytest.approx(144.0)
        assert breakdown.after_early_bird == pytest.approx(129.6)
        assert breakdown.after_early_bird == pytest.approx(breakdown.channel_adjusted_rate * (1 - 10 / 100))

    @pytest.mark.parametrize("adults,expected_total", [
        (1, 180.0),   # single
        (2, 240.0),   # double
        (3, 300.0),   # triple
        (4, 300.0),   # quad not offered, falls back to triple
    ])
    def test_occupancy_priced_stay(self, service, adults, expected_total):
        breakdown = service.quote_stay(
            _stay(end=date(2026, 3, 3), adults=adults), OCCUPANCY_RATES, _economics()
        )

        assert breakdown.total == pytest.approx(expected_total)

    def test_rate_without_priced_occupancy(self, service):
        rates = [
            RateRecord(
                category_id="suite",
                base_rate=100.0,
                currency="AED",
                valid_from=date(2026, 1, 1),
                valid_to=date(2027, 1, 1),
                occupancy_prices={"double": 0.0},
            ),
        ]

        with patch('stayrate.application.quote_service.logger') as mock_logger:
            with pytest.raises(NoApplicableRateError) as exc:
                service.quote_stay(_stay(), rates, _economics())

        assert exc.value.category_id == "suite"
        mock_logger.warning.assert_called_once()

    def test_company_paid_incidentals_are_charged(self, service):
        economics = _economics(
            room_tax_rate=10,
            resort_fee_daily=20.0,
            incidentals_handling=IncidentalsHandling.COMPANY_PAYS,
        )

        breakdown = service.quote_stay(_stay(end=date(2026, 3, 3)), RATES, economics)

        assert breakdown.taxes_and_fees.room_tax == pytest.approx(20.0)
        assert breakdown.taxes_and_fees.resort_fee == pytest.approx(40.0)
        assert breakdown.taxes_and_fees.fees_at_property == 0.0
        assert breakdown.total == pytest.approx(260.0)

    def test_failure_is_logged_and_reraised(self, service):
        request = _stay(start=date(2026, 3, 8), end=date(2026, 3, 12))

        with patch('stayrate.application.quote_service.logger') as mock_logger:
            with pytest.raises(NoApplicableRateError) as exc:
                service.quote_stay(request, RATES, _economics())

        assert exc.value.date == date(2026, 3, 10)
        mock_logger.warning.assert_called_once()
        mock_logger.info.assert_not_called()


class TestQuoteTickets:
    def test_b2b_group_tickets(self, service):
        request = TicketRequest(
            event_date=date(2026, 4, 18),
            quantity=10,
            age_band=AgeBand.ADULT,
            channel=Channel.B2B,
            group_discount_pct=5,
            early_bird_discount_pct=0,
        )
        economics = _economics(
            supplier_commission_rate=0.15,
            supplier_vat_rate=0.05,
            customer_vat_rate=5,
            service_fee_per_unit=2.5,
        )

        breakdown = service.quote_tickets(request, TICKET_RATES, economics)

        assert breakdown.subtotal == pytest.approx(855.0)
        assert breakdown.taxes_and_fees.service_fees == pytest.approx(25.0)
        assert breakdown.taxes_and_fees.customer_vat == pytest.approx(44.0)
        assert breakdown.total == pytest.approx(924.0)
        assert breakdown.supplier_side.commission == pytest.approx(128.25)
        assert breakdown.supplier_side.supplier_vat == pytest.approx(6.4125)

    def test_child_ticket_on_reseller_channel(self, service):
        request = TicketRequest(
            event_date=date(2026, 4, 18),
            quantity=1,
            age_band="child",
            channel="reseller",
            group_discount_pct=0,
            early_bird_discount_pct=0,
        )

        breakdown = service.quote_tickets(request, TICKET_RATES, _economics())

        assert breakdown.total == pytest.approx(57.5)
        assert breakdown.nights_or_units == 1

    def test_event_date_without_rate(self, service):
        request = TicketRequest(
            event_date=date(2027, 2, 1),
            quantity=2,
            age_band=AgeBand.ADULT,
            channel=Channel.WEB,
            group_discount_pct=0,
            early_bird_discount_pct=0,
        )

        with patch('stayrate.application.quote_service.logger') as mock_logger:
            with pytest.raises(NoApplicableRateError):
                service.quote_tickets(request, TICKET_RATES, _economics())

        mock_logger.warning.assert_called_once()


class TestOffersAndAvailability:
    def test_offer_gross_rate_uses_most_specific_policy(self, service):
        policies = [
            PricingPolicy("markup_pct", 20),
            PricingPolicy("gross_fixed", 150, offer_id="o1"),
        ]

        offer = service.offer_gross_rate(100.0, policies, Channel.WEB, offer_id="o1")
        other = service.offer_gross_rate(100.0, policies, Channel.WEB, offer_id="o2")

        assert offer.gross_rate == pytest.approx(150.0)
        assert offer.applied_markup == pytest.approx(50.0)
        assert other.strategy == "markup_pct"
        assert other.gross_rate == pytest.approx(120.0)

    def test_check_availability_logs_when_pool_is_short(self, service):
        pool = AllocationPool(pool_id="gp-2026", total_capacity=10, booked=8)

        with patch('stayrate.application.quote_service.logger') as mock_logger:
            availability = service.check_availability(pool, 3)

        assert availability.can_book is False
        assert availability.available == 2
        mock_logger.info.assert_called_once()

    def test_booking_profit(self, service):
        profit = service.booking_profit(selling_price=150.0, cost_per_unit=120.0, quantity=2)

        assert profit.total_profit == pytest.approx(60.0)
        assert profit.profit_margin_pct == pytest.approx(20.0)

    def test_best_supplier(self, service):
        allocations = [
            SupplierAllocation("s1", "gp-2026", 10, cost_per_unit=900.0),
            SupplierAllocation("s2", "gp-2026", 4, cost_per_unit=850.0),
        ]

        with patch('stayrate.application.quote_service.logger') as mock_logger:
            supplier = service.best_supplier("gp-2026", allocations)

        assert supplier.supplier_id == "s2"
        mock_logger.info.assert_not_called()

    def test_best_supplier_logs_unpriced_pool(self, service):
        allocations = [SupplierAllocation("s1", "gp-2026", 10)]

        with patch('stayrate.application.quote_service.logger') as mock_logger:
            supplier = service.best_supplier("gp-2026", allocations)

        assert supplier is None
        mock_logger.info.assert_called_once()
