# src/stayrate/domain/__init__.py
"""
Domain Layer - Pure Pricing Objects

This package contains the pricing value objects, closed key sets and the
error taxonomy. No dependencies on infrastructure or external systems.
"""

from stayrate.domain.enums import (
    AgeBand,
    BoardType,
    Channel,
    FeeMode,
    FeePayable,
    IncidentalsHandling,
    Occupancy,
)
from stayrate.domain.errors import (
    AmbiguousRateSelectionError,
    DomainError,
    InvalidPricingInputError,
    NoApplicableRateError,
    PricingError,
    UnknownEnumValueError,
)
from stayrate.domain.models import (
    AllocationPool,
    Availability,
    BookingProfit,
    ContractEconomics,
    Fee,
    PartyComposition,
    PeriodPrice,
    PriceBreakdown,
    PricingPolicy,
    PolicyQuote,
    RatePeriod,
    RateRecord,
    StayRequest,
    SupplierAllocation,
    SupplierSide,
    TaxesAndFees,
    TicketRequest,
)

__all__ = [
    "AgeBand",
    "BoardType",
    "Channel",
    "FeeMode",
    "FeePayable",
    "IncidentalsHandling",
    "Occupancy",
    "DomainError",
    "PricingError",
    "NoApplicableRateError",
    "InvalidPricingInputError",
    "UnknownEnumValueError",
    "AmbiguousRateSelectionError",
    "RateRecord",
    "Fee",
    "ContractEconomics",
    "PartyComposition",
    "StayRequest",
    "TicketRequest",
    "RatePeriod",
    "PeriodPrice",
    "TaxesAndFees",
    "SupplierSide",
    "PriceBreakdown",
    "PricingPolicy",
    "PolicyQuote",
    "AllocationPool",
    "Availability",
    "BookingProfit",
    "SupplierAllocation",
]
