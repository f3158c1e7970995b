# src/stayrate/application/economics.py
"""
Economics Calculator - Price One Rate Period

This module turns one RatePeriod plus a contract's economics into a
PeriodPrice. The step order is fixed; reordering changes results:

1. unit_rate = base_rate * age multiplier + add-on cost (board, extra adults);
   for stays the base rate is the rate's occupancy price when it has any
2. marked_up_rate = unit_rate * (1 + effective markup)
   (the rate record's markup_percentage wins over the contract default)
3. channel_adjusted_rate = marked_up_rate * (1 + channel coefficient)
4. after_early_bird, then after_group_discount
5. period_subtotal = after_group_discount * nights_or_units
6. fees by mode, split into fees_included (us) and fees_at_property;
   room tax, the daily resort fee and its tax go to whichever side
   incidentals_handling names
7. commission = subtotal * supplier_commission_rate,
   supplier_vat = commission * supplier_vat_rate
8. customer_vat = (subtotal + fees_included) * customer_vat_rate / 100
9. period_total = subtotal + fees_included + customer_vat

Files that USE this module:
- stayrate.application.quote_service (prices every resolved period)
- tests.test_economics (unit tests)

Files that this module USES:
- stayrate.application.adjuster (age band, channel and discount transforms)
- stayrate.domain.models (RatePeriod, RateRecord, ContractEconomics, Fee, PeriodPrice)
- stayrate.domain.enums (fee modes, occupancy fallback order, incidentals handling)
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from stayrate.application.adjuster import (
    age_band_multiplier,
    apply_channel_adjustment,
    apply_discounts,
)
from stayrate.domain.enums import (
    BOOKING_LEVEL_FEE_MODES,
    OCCUPANCY_FALLBACK,
    AgeBand,
    Channel,
    FeeMode,
    FeePayable,
    IncidentalsHandling,
    Occupancy,
    occupancy_for_adults,
)
from stayrate.domain.errors import InvalidPricingInputError, NoApplicableRateError
from stayrate.domain.models import (
    ContractEconomics,
    Fee,
    PartyComposition,
    PeriodPrice,
    RatePeriod,
    RateRecord,
)
from stayrate.shared.validators import is_non_negative

CITY_TAX = "city_tax"
RESORT_FEE = "resort_fee"
SERVICE_FEE = "service_fee"


def fee_amount(
    fee: Fee,
    units: int,
    nights: int,
    guests: int,
    period_subtotal: float,
) -> float:
    """
    Amount one fee line contributes to a period.

    Args:
        fee: Fee line from the contract
        units: Nights (stays) or tickets (ticket quotes) in the period
        nights: Nights in the period (1 for a ticket date)
        guests: Total guests on the booking
        period_subtotal: Discounted subtotal the percent mode applies to

    Returns:
        Fee amount in contract currency
    """
    if fee.mode is FeeMode.PER_UNIT:
        return fee.amount * units
    if fee.mode is FeeMode.PER_PERSON:
        return fee.amount * guests
    if fee.mode is FeeMode.PER_NIGHT:
        return fee.amount * nights
    if fee.mode is FeeMode.PER_PERSON_PER_NIGHT:
        return fee.amount * guests * nights
    if fee.mode is FeeMode.PER_ROOM_PER_NIGHT:
        return fee.amount * nights
    if fee.mode is FeeMode.PERCENT_OF_RATE:
        return period_subtotal * fee.amount / 100
    return fee.amount  # FeeMode.FIXED


def occupancy_base_rate(
    rate: RateRecord,
    adults: int,
    on_date: date,
) -> tuple[Optional[Occupancy], float]:
    """
    Base rate of a stay night for a party of adults.

    Rates without occupancy prices use base_rate. Otherwise the requested
    occupancy (1 single, 2 double, 3 triple, 4+ quad) is tried first, then
    the fallback order of OCCUPANCY_FALLBACK.

    Args:
        rate: Rate record governing the night
        adults: Adults in the room
        on_date: First night of the period, for the error

    Returns:
        (occupancy priced, base rate); occupancy is None for plain base_rate

    Raises:
        NoApplicableRateError: If the rate offers no occupancy at all
    """
    if not rate.occupancy_prices:
        return None, rate.base_rate
    for occupancy in OCCUPANCY_FALLBACK[occupancy_for_adults(adults)]:
        price = rate.occupancy_price(occupancy)
        if price is not None:
            return occupancy, price
    raise NoApplicableRateError(on_date, rate.category_id)


def price_period(
    period: RatePeriod,
    economics: ContractEconomics,
    channel: Channel,
    party: PartyComposition,
    early_bird_discount_pct: float,
    group_discount_pct: float,
    add_on_cost: float = 0.0,
    age_band: Optional[AgeBand] = None,
    include_booking_fees: bool = True,
) -> PeriodPrice:
    """
    Price one rate period.

    Args:
        period: Period produced by the resolver
        economics: Contract economics
        channel: Sales channel
        party: Guests, used by per-person fee modes
        early_bird_discount_pct: Early-bird discount in percentage points
        group_discount_pct: Group discount in percentage points
        add_on_cost: Per-night/per-unit add-on (board cost for hotels, else 0)
        age_band: Ticket age band; None for stays
        include_booking_fees: Charge per_person and fixed fees on this period

    Returns:
        PeriodPrice with every intermediate figure

    Raises:
        InvalidPricingInputError: On negative inputs or a negative discounted rate
        UnknownEnumValueError: On an unknown channel or age band key
    """
    if not is_non_negative(add_on_cost):
        raise InvalidPricingInputError(f"add-on cost must be non-negative, got {add_on_cost!r}")

    rate = period.rate
    units = period.nights_or_units
    nights = (period.end_date - period.start_date).days

    occupancy: Optional[Occupancy] = None
    if age_band is None:
        occupancy, base_rate = occupancy_base_rate(rate, party.adults, period.start_date)
        multiplier = 1.0
    else:
        base_rate = rate.base_rate
        multiplier = age_band_multiplier(age_band)
    unit_rate = base_rate * multiplier + add_on_cost

    markup_pct = (
        rate.markup_percentage
        if rate.markup_percentage is not None
        else economics.default_markup_percentage
    )
    marked_up_rate = unit_rate * (1 + markup_pct)
    channel_adjusted_rate = apply_channel_adjustment(marked_up_rate, channel)
    after_early_bird, after_group_discount = apply_discounts(
        channel_adjusted_rate, early_bird_discount_pct, group_discount_pct
    )
    if after_group_discount < 0:
        raise InvalidPricingInputError(
            f"discounted rate for {rate.label} is negative ({after_group_discount})"
        )

    period_subtotal = after_group_discount * units

    city_tax = resort_fee = service_fees = 0.0
    fees_included = fees_at_property = 0.0

    lines = list(economics.fees)
    if economics.service_fee_per_unit:
        lines.append(Fee(SERVICE_FEE, FeeMode.PER_UNIT, economics.service_fee_per_unit, FeePayable.US))

    for fee in lines:
        if fee.mode in BOOKING_LEVEL_FEE_MODES and not include_booking_fees:
            continue
        amount = fee_amount(fee, units, nights, party.total_guests, period_subtotal)
        if fee.payable is FeePayable.US:
            fees_included += amount
        else:
            fees_at_property += amount

        if fee.code == CITY_TAX:
            city_tax += amount
        elif fee.code == RESORT_FEE:
            resort_fee += amount
        elif fee.payable is FeePayable.US:
            service_fees += amount

    room_tax = period_subtotal * economics.room_tax_rate / 100
    daily_resort_fee = economics.resort_fee_daily * nights
    resort_fee_tax = 0.0
    if economics.resort_fee_taxable:
        resort_fee_tax = daily_resort_fee * economics.room_tax_rate / 100
    resort_fee += daily_resort_fee
    incidentals = room_tax + daily_resort_fee + resort_fee_tax
    if economics.incidentals_handling is IncidentalsHandling.COMPANY_PAYS:
        fees_included += incidentals
    else:
        fees_at_property += incidentals

    commission = period_subtotal * economics.supplier_commission_rate
    supplier_vat = commission * economics.supplier_vat_rate
    customer_vat = (period_subtotal + fees_included) * economics.customer_vat_rate / 100
    period_total = period_subtotal + fees_included + customer_vat

    return PeriodPrice(
        period=period,
        base_rate=base_rate,
        add_on_cost=add_on_cost,
        unit_rate=unit_rate,
        markup_pct=markup_pct,
        marked_up_rate=marked_up_rate,
        channel_adjusted_rate=channel_adjusted_rate,
        after_early_bird=after_early_bird,
        after_group_discount=after_group_discount,
        period_subtotal=period_subtotal,
        city_tax=city_tax,
        resort_fee=resort_fee,
        room_tax=room_tax,
        resort_fee_tax=resort_fee_tax,
        service_fees=service_fees,
        fees_included=fees_included,
        fees_at_property=fees_at_property,
        commission=commission,
        supplier_vat=supplier_vat,
        customer_vat=customer_vat,
        period_total=period_total,
        occupancy=occupancy,
    )
