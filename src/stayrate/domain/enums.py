# src/stayrate/domain/enums.py
"""
Domain Enums - Closed Sets of Pricing Keys

This module defines the closed vocabularies the engine accepts (sales
channels, ticket age bands, fee modes, fee payees, board types, room
occupancies, incidentals handling) and the fixed lookup tables attached
to them.

Files that USE this module:
- stayrate.domain.models (field types)
- stayrate.application.adjuster (channel coefficients, age-band multipliers)
- stayrate.application.economics (fee modes, booking-level fee modes,
  occupancy fallback order, incidentals handling)
- stayrate.application.quote_service (board costs)
- stayrate.app (board labels in scenario descriptions)

Files that this module USES:
- stayrate.domain.errors (UnknownEnumValueError)
"""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from stayrate.domain.errors import UnknownEnumValueError


class Channel(str, Enum):
    """Sales route a quote is priced for."""
    WEB = "web"
    B2B = "b2b"
    INTERNAL = "internal"
    BOX_OFFICE = "box_office"
    RESELLER = "reseller"


class AgeBand(str, Enum):
    """Ticket pricing tier."""
    ADULT = "adult"
    CHILD = "child"
    SENIOR = "senior"
    STUDENT = "student"
    INFANT = "infant"


class FeeMode(str, Enum):
    """How a contract fee amount scales with the booking."""
    PER_UNIT = "per_unit"
    PER_PERSON = "per_person"
    PER_NIGHT = "per_night"
    PER_PERSON_PER_NIGHT = "per_person_per_night"
    PER_ROOM_PER_NIGHT = "per_room_per_night"
    PERCENT_OF_RATE = "percent_of_rate"
    FIXED = "fixed"


class FeePayable(str, Enum):
    """Who collects a fee: us (included in totals) or the property (pass-through)."""
    US = "us"
    PROPERTY = "property"


class BoardType(str, Enum):
    """Hotel meal plan."""
    ROOM_ONLY = "ro"
    BED_AND_BREAKFAST = "bb"
    HALF_BOARD = "hb"
    FULL_BOARD = "fb"
    ALL_INCLUSIVE = "ai"


class Occupancy(str, Enum):
    """Room occupancy a price is quoted for."""
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    QUAD = "quad"


class IncidentalsHandling(str, Enum):
    """Who settles room tax and the daily resort fee."""
    COMPANY_PAYS = "company_pays"
    GUEST_PAYS = "guest_pays"


# Signed fractions applied as rate * (1 + coefficient)
CHANNEL_COEFFICIENTS: dict[Channel, float] = {
    Channel.WEB: 0.0,
    Channel.B2B: -0.10,
    Channel.INTERNAL: -0.20,
    Channel.BOX_OFFICE: 0.05,
    Channel.RESELLER: 0.15,
}

AGE_BAND_MULTIPLIERS: dict[AgeBand, float] = {
    AgeBand.ADULT: 1.0,
    AgeBand.CHILD: 0.5,
    AgeBand.SENIOR: 0.8,
    AgeBand.STUDENT: 0.7,
    AgeBand.INFANT: 0.1,
}

# Add-on cost per room-night
BOARD_COSTS: dict[BoardType, float] = {
    BoardType.ROOM_ONLY: 0.0,
    BoardType.BED_AND_BREAKFAST: 25.0,
    BoardType.HALF_BOARD: 45.0,
    BoardType.FULL_BOARD: 65.0,
    BoardType.ALL_INCLUSIVE: 85.0,
}

BOARD_LABELS: dict[BoardType, str] = {
    BoardType.ROOM_ONLY: "Room Only",
    BoardType.BED_AND_BREAKFAST: "Bed & Breakfast",
    BoardType.HALF_BOARD: "Half Board",
    BoardType.FULL_BOARD: "Full Board",
    BoardType.ALL_INCLUSIVE: "All Inclusive",
}

# Fee modes charged once per quote rather than once per rate period
BOOKING_LEVEL_FEE_MODES = frozenset({FeeMode.PER_PERSON, FeeMode.FIXED})

# Order tried when a rate has no price for the requested occupancy
OCCUPANCY_FALLBACK: dict[Occupancy, tuple[Occupancy, ...]] = {
    Occupancy.SINGLE: (Occupancy.SINGLE, Occupancy.DOUBLE, Occupancy.TRIPLE, Occupancy.QUAD),
    Occupancy.DOUBLE: (Occupancy.DOUBLE, Occupancy.TRIPLE, Occupancy.QUAD, Occupancy.SINGLE),
    Occupancy.TRIPLE: (Occupancy.TRIPLE, Occupancy.QUAD, Occupancy.DOUBLE, Occupancy.SINGLE),
    Occupancy.QUAD: (Occupancy.QUAD, Occupancy.TRIPLE, Occupancy.DOUBLE, Occupancy.SINGLE),
}

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: Type[E], value: object, kind: str) -> E:
    """
    Convert a caller-supplied key into a member of enum_cls.

    Members pass through unchanged; strings are matched case-insensitively
    against member values.

    Args:
        enum_cls: Target enum class
        value: Enum member or string key
        kind: Human-readable name used in the error message

    Returns:
        The matching enum member

    Raises:
        UnknownEnumValueError: If value matches no member
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if member.value == key:
                return member
    raise UnknownEnumValueError(kind, value)


def parse_channel(value: object) -> Channel:
    return parse_enum(Channel, value, "channel")


def parse_age_band(value: object) -> AgeBand:
    return parse_enum(AgeBand, value, "age band")


def parse_fee_mode(value: object) -> FeeMode:
    return parse_enum(FeeMode, value, "fee mode")


def parse_fee_payable(value: object) -> FeePayable:
    return parse_enum(FeePayable, value, "fee payee")


def parse_board(value: object) -> BoardType:
    return parse_enum(BoardType, value, "board type")


def parse_occupancy(value: object) -> Occupancy:
    return parse_enum(Occupancy, value, "occupancy")


def parse_incidentals_handling(value: object) -> IncidentalsHandling:
    return parse_enum(IncidentalsHandling, value, "incidentals handling")


def occupancy_for_adults(adults: int) -> Occupancy:
    """Requested occupancy for a party: 1 single, 2 double, 3 triple, 4 or more quad."""
    if adults >= 4:
        return Occupancy.QUAD
    if adults == 3:
        return Occupancy.TRIPLE
    if adults == 2:
        return Occupancy.DOUBLE
    return Occupancy.SINGLE
