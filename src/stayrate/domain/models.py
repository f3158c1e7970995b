# src/stayrate/domain/models.py
"""
Domain Models - Pricing Value Objects

This module contains the immutable value records the pricing engine
consumes and produces:
- Rate records and contract economics (supplied by the inventory store)
- Stay and ticket requests (supplied by pricing panels)
- Rate periods and per-period prices (engine-internal)
- Price breakdowns (engine output)
- Pricing policies, allocation pools and supplier allocations

Percentage conventions differ per field and are kept as the inventory
data stores them:
- fractions in [0, 1]: markup_percentage, supplier_commission_rate,
  supplier_vat_rate, default_markup_percentage
- percentage points in [0, 100]: customer_vat_rate, discount percentages,
  percent_of_rate fee amounts, room_tax_rate, policy values

Every record validates its own fields on construction and raises
InvalidPricingInputError instead of coercing.

Files that USE this module:
- stayrate.application.* (all engine components)
- stayrate.adapters.formatting.formatter (renders PriceBreakdown)
- stayrate.app (builds simulator scenarios)
- tests.* (tests build inputs from these records)

Files that this module USES:
- stayrate.domain.enums (Channel, AgeBand, FeeMode, FeePayable, BoardType,
  Occupancy, IncidentalsHandling)
- stayrate.domain.errors (InvalidPricingInputError)
- stayrate.shared.validators (numeric predicates)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date  # Calendar dates for stays and validity windows
from typing import Mapping, Optional  # Type hints for mappings and optional values

from stayrate.domain.enums import (
    AGE_BAND_MULTIPLIERS,
    AgeBand,
    BoardType,
    Channel,
    FeeMode,
    FeePayable,
    IncidentalsHandling,
    Occupancy,
    parse_age_band,
    parse_board,
    parse_channel,
    parse_fee_mode,
    parse_fee_payable,
    parse_incidentals_handling,
    parse_occupancy,
)
from stayrate.domain.errors import InvalidPricingInputError, UnknownEnumValueError
from stayrate.shared.validators import (
    is_count,
    is_fraction,
    is_non_negative,
    is_percentage_points,
)

ALL_WEEKDAYS = frozenset(range(7))  # date.weekday(): Monday=0 .. Sunday=6
POLICY_STRATEGIES = ("markup_pct", "gross_fixed", "agent_commission")


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidPricingInputError(message)


@dataclass(frozen=True)
class RateRecord:
    """
    One priced offering for a category over a half-open validity window.

    Attributes:
        category_id: Room type / ticket category the rate prices
        base_rate: Net price per night or per unit
        currency: Currency of base_rate
        valid_from: First date the rate applies (inclusive)
        valid_to: End of the window (exclusive)
        days_of_week: Weekdays the rate applies on (date.weekday() values)
        active: Inactive records are never selected
        contract_id: Contract the rate belongs to, if any
        markup_percentage: Fraction overriding the contract default markup
        rate_id: Caller identifier used for explicit tie-break selection
        occupancy_prices: Per-night prices keyed by room occupancy; when
            present they replace base_rate for stays (zero means not offered)
    """
    category_id: str
    base_rate: float
    currency: str
    valid_from: date
    valid_to: date
    days_of_week: frozenset[int] = ALL_WEEKDAYS
    active: bool = True
    contract_id: Optional[str] = None
    markup_percentage: Optional[float] = None
    rate_id: Optional[str] = None
    occupancy_prices: tuple[tuple[Occupancy, float], ...] = ()

    def __post_init__(self):
        days = frozenset(self.days_of_week)
        object.__setattr__(self, "days_of_week", days)
        object.__setattr__(self, "occupancy_prices", self._normalize_occupancy_prices())
        _require(self.valid_from < self.valid_to,
                 f"Rate {self.label}: valid_from must be before valid_to")
        _require(is_non_negative(self.base_rate),
                 f"Rate {self.label}: base_rate must be a non-negative number")
        _require(bool(days) and days <= ALL_WEEKDAYS,
                 f"Rate {self.label}: days_of_week must be a non-empty subset of 0-6")
        if self.markup_percentage is not None:
            _require(is_fraction(self.markup_percentage),
                     f"Rate {self.label}: markup_percentage must be a fraction in [0, 1]")

    def _normalize_occupancy_prices(self) -> tuple[tuple[Occupancy, float], ...]:
        pairs = self.occupancy_prices
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        prices: dict[Occupancy, float] = {}
        for key, price in pairs:
            occupancy = parse_occupancy(key)
            _require(occupancy not in prices,
                     f"Rate {self.label}: duplicate {occupancy.value} occupancy price")
            _require(is_non_negative(price),
                     f"Rate {self.label}: {occupancy.value} price must be a non-negative number")
            prices[occupancy] = price
        return tuple((occupancy, prices[occupancy]) for occupancy in Occupancy if occupancy in prices)

    def occupancy_price(self, occupancy: Occupancy) -> Optional[float]:
        """Price for an occupancy, or None if the rate does not offer it."""
        for key, price in self.occupancy_prices:
            if key is occupancy and price > 0:
                return price
        return None

    @property
    def label(self) -> str:
        return self.rate_id or self.category_id

    @property
    def window_days(self) -> int:
        """Width of the validity window in days."""
        return (self.valid_to - self.valid_from).days

    def covers(self, on_date: date) -> bool:
        """True if the record is active and applies on on_date."""
        return (
            self.active
            and self.valid_from <= on_date < self.valid_to
            and on_date.weekday() in self.days_of_week
        )


@dataclass(frozen=True)
class Fee:
    """
    A contract fee line.

    Attributes:
        code: Fee code ("city_tax" and "resort_fee" get their own breakdown lines)
        mode: How the amount scales (see FeeMode)
        amount: Currency amount, or percentage points for percent_of_rate
        payable: US fees are included in totals; PROPERTY fees are reported only
    """
    code: str
    mode: FeeMode
    amount: float
    payable: FeePayable

    def __post_init__(self):
        object.__setattr__(self, "mode", parse_fee_mode(self.mode))
        object.__setattr__(self, "payable", parse_fee_payable(self.payable))
        _require(is_non_negative(self.amount),
                 f"Fee {self.code}: amount must be a non-negative number")
        if self.mode is FeeMode.PERCENT_OF_RATE:
            _require(is_percentage_points(self.amount),
                     f"Fee {self.code}: percent_of_rate amount must be in [0, 100]")


@dataclass(frozen=True)
class ContractEconomics:
    """
    Supplier-side commercial terms attached to a contract.

    Attributes:
        supplier_commission_rate: Fraction of the subtotal owed to the supplier
        supplier_vat_rate: Fraction of the commission charged as supplier VAT
        customer_vat_rate: Percentage points of VAT charged to the customer
        default_markup_percentage: Fraction used when the rate carries no markup
        service_fee_per_unit: Flat fee per night/ticket payable to us
        fees: Additional fee lines
        additional_person_charge: Per night charge for each adult beyond two
        max_occupancy: Adult limit per room, if any
        currency: Contract currency, if fixed
        room_tax_rate: Percentage points of room tax on the room subtotal
        resort_fee_daily: Resort fee per room-night
        resort_fee_taxable: Charge room tax on the daily resort fee as well
        incidentals_handling: COMPANY_PAYS includes room tax and the daily
            resort fee in our totals; GUEST_PAYS leaves them to the property
    """
    supplier_commission_rate: float
    supplier_vat_rate: float
    customer_vat_rate: float
    default_markup_percentage: float
    service_fee_per_unit: float = 0.0
    fees: tuple[Fee, ...] = ()
    additional_person_charge: float = 0.0
    max_occupancy: Optional[int] = None
    currency: Optional[str] = None
    room_tax_rate: float = 0.0
    resort_fee_daily: float = 0.0
    resort_fee_taxable: bool = False
    incidentals_handling: IncidentalsHandling = IncidentalsHandling.GUEST_PAYS

    def __post_init__(self):
        object.__setattr__(self, "fees", tuple(self.fees))
        object.__setattr__(self, "incidentals_handling",
                           parse_incidentals_handling(self.incidentals_handling))
        _require(is_percentage_points(self.room_tax_rate),
                 "room_tax_rate must be in percentage points [0, 100]")
        _require(is_non_negative(self.resort_fee_daily),
                 "resort_fee_daily must be a non-negative number")
        _require(is_fraction(self.supplier_commission_rate),
                 "supplier_commission_rate must be a fraction in [0, 1]")
        _require(is_fraction(self.supplier_vat_rate),
                 "supplier_vat_rate must be a fraction in [0, 1]")
        _require(is_percentage_points(self.customer_vat_rate),
                 "customer_vat_rate must be in percentage points [0, 100]")
        _require(is_fraction(self.default_markup_percentage),
                 "default_markup_percentage must be a fraction in [0, 1]")
        _require(is_non_negative(self.service_fee_per_unit),
                 "service_fee_per_unit must be a non-negative number")
        _require(is_non_negative(self.additional_person_charge),
                 "additional_person_charge must be a non-negative number")
        if self.max_occupancy is not None:
            _require(is_count(self.max_occupancy, 1),
                     "max_occupancy must be a positive integer")


@dataclass(frozen=True)
class PartyComposition:
    """Guests on a booking; every guest counts towards per-person fees."""
    adults: int
    children: int

    def __post_init__(self):
        _require(is_count(self.adults), "adults must be a non-negative integer")
        _require(is_count(self.children), "children must be a non-negative integer")

    @property
    def total_guests(self) -> int:
        return self.adults + self.children


def _check_discounts(group_discount_pct: float, early_bird_discount_pct: float) -> None:
    _require(is_percentage_points(group_discount_pct),
             "group_discount_pct must be in percentage points [0, 100]")
    _require(is_percentage_points(early_bird_discount_pct),
             "early_bird_discount_pct must be in percentage points [0, 100]")


@dataclass(frozen=True)
class StayRequest:
    """
    Pricing query for a multi-night stay over [start_date, end_date).

    Every pricing parameter is required; there are no hidden defaults.
    """
    start_date: date
    end_date: date
    party: PartyComposition
    channel: Channel
    board: BoardType
    group_discount_pct: float
    early_bird_discount_pct: float
    selected_rate_ids: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "channel", parse_channel(self.channel))
        object.__setattr__(self, "board", parse_board(self.board))
        object.__setattr__(self, "selected_rate_ids", tuple(self.selected_rate_ids))
        _require(self.start_date < self.end_date, "start_date must be before end_date")
        _require(self.party.adults >= 1, "a stay needs at least one adult")
        _check_discounts(self.group_discount_pct, self.early_bird_discount_pct)

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days


@dataclass(frozen=True)
class TicketRequest:
    """Pricing query for quantity tickets of one age band on event_date."""
    event_date: date
    quantity: int
    age_band: AgeBand
    channel: Channel
    group_discount_pct: float
    early_bird_discount_pct: float
    selected_rate_ids: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "age_band", parse_age_band(self.age_band))
        object.__setattr__(self, "channel", parse_channel(self.channel))
        object.__setattr__(self, "selected_rate_ids", tuple(self.selected_rate_ids))
        _require(is_count(self.quantity, 1), "quantity must be a positive integer")
        _check_discounts(self.group_discount_pct, self.early_bird_discount_pct)

    @property
    def party(self) -> PartyComposition:
        """One guest per ticket."""
        if self.age_band in (AgeBand.CHILD, AgeBand.INFANT):
            return PartyComposition(adults=0, children=self.quantity)
        return PartyComposition(adults=self.quantity, children=0)

    @property
    def age_multiplier(self) -> float:
        return AGE_BAND_MULTIPLIERS[self.age_band]


@dataclass(frozen=True)
class RatePeriod:
    """Contiguous run of nights (or a ticket unit count) governed by one rate."""
    start_date: date
    end_date: date
    nights_or_units: int
    rate: RateRecord


@dataclass(frozen=True)
class PeriodPrice:
    """
    Priced result for one RatePeriod, keeping every intermediate figure.

    Per-unit figures (unit_rate .. after_group_discount) are per night or
    per ticket; the rest are totals for the period.
    """
    period: RatePeriod
    base_rate: float
    add_on_cost: float
    unit_rate: float
    markup_pct: float
    marked_up_rate: float
    channel_adjusted_rate: float
    after_early_bird: float
    after_group_discount: float
    period_subtotal: float
    city_tax: float
    resort_fee: float
    room_tax: float
    resort_fee_tax: float
    service_fees: float
    fees_included: float
    fees_at_property: float
    commission: float
    supplier_vat: float
    customer_vat: float
    period_total: float
    occupancy: Optional[Occupancy] = None

    @property
    def nights_or_units(self) -> int:
        return self.period.nights_or_units

    @property
    def currency(self) -> str:
        return self.period.rate.currency


@dataclass(frozen=True)
class TaxesAndFees:
    """Customer-facing taxes and fees of a quote."""
    city_tax: float
    resort_fee: float
    room_tax: float
    resort_fee_tax: float
    customer_vat: float
    service_fees: float
    fees_included: float
    fees_at_property: float


@dataclass(frozen=True)
class SupplierSide:
    """What the supplier retains out of the quote."""
    commission: float
    supplier_vat: float


@dataclass(frozen=True)
class PriceBreakdown:
    """
    Itemized result of one pricing call.

    base_rate and the per-unit rate figures are night/unit-weighted
    averages for display; subtotal, fees and total are sums of the
    per-period figures.
    """
    base_rate: float
    board_or_add_on_cost: float
    marked_up_rate: float
    channel_adjusted_rate: float
    after_early_bird: float
    after_group_discount: float
    subtotal: float
    taxes_and_fees: TaxesAndFees
    supplier_side: SupplierSide
    total: float
    margin_estimate: float
    nights_or_units: int
    currency: str
    periods: tuple[PeriodPrice, ...]

    @property
    def margin_pct(self) -> float:
        """Margin estimate as percentage points of the total (0 for a zero total)."""
        if self.total == 0:
            return 0.0
        return self.margin_estimate / self.total * 100


@dataclass(frozen=True)
class PricingPolicy:
    """
    Markup policy scoped globally, to a channel, or to a single offer.

    Attributes:
        strategy: "markup_pct", "gross_fixed" or "agent_commission"
        value: Percentage points for percent strategies, gross price for gross_fixed
        channel: Channel scope, if any
        offer_id: Offer scope, if any
        active: Inactive policies are never selected
    """
    strategy: str
    value: float
    channel: Optional[Channel] = None
    offer_id: Optional[str] = None
    active: bool = True

    def __post_init__(self):
        if self.strategy not in POLICY_STRATEGIES:
            raise UnknownEnumValueError("pricing strategy", self.strategy)
        if self.channel is not None:
            object.__setattr__(self, "channel", parse_channel(self.channel))
        _require(is_non_negative(self.value), "policy value must be a non-negative number")

    @property
    def specificity(self) -> int:
        score = 0
        if self.offer_id:
            score += 3
        if self.channel:
            score += 2
        return score


@dataclass(frozen=True)
class PolicyQuote:
    """Gross price of an offer after its pricing policy."""
    base_net: float
    strategy: str
    value: float
    applied_markup: float
    gross_rate: float


@dataclass(frozen=True)
class AllocationPool:
    """Capacity counter shared by one or more rate records."""
    pool_id: str
    total_capacity: int
    booked: int = 0

    def __post_init__(self):
        _require(is_count(self.total_capacity), "total_capacity must be a non-negative integer")
        _require(is_count(self.booked), "booked must be a non-negative integer")

    @property
    def available_spots(self) -> int:
        return max(self.total_capacity - self.booked, 0)

    @property
    def utilization_pct(self) -> float:
        if self.total_capacity == 0:
            return 0.0
        return self.booked / self.total_capacity * 100


@dataclass(frozen=True)
class Availability:
    """Result of an availability check against an allocation pool."""
    allocated: int
    available: int
    can_book: bool


@dataclass(frozen=True)
class SupplierAllocation:
    """
    Units one supplier contributes to an allocation pool.

    Attributes:
        supplier_id: Supplier identifier
        pool_id: Pool the units feed
        quantity: Units allocated
        cost_per_unit: Contract cost per unit; None or 0 means unpriced
        contract_id: Contract the cost comes from, if any
    """
    supplier_id: str
    pool_id: str
    quantity: int
    cost_per_unit: Optional[float] = None
    contract_id: Optional[str] = None

    def __post_init__(self):
        _require(is_count(self.quantity), "quantity must be a non-negative integer")
        if self.cost_per_unit is not None:
            _require(is_non_negative(self.cost_per_unit),
                     "cost_per_unit must be a non-negative number")


@dataclass(frozen=True)
class BookingProfit:
    """Cost, revenue and profit of one booking."""
    total_cost: float
    total_revenue: float
    total_profit: float
    profit_margin_pct: float
