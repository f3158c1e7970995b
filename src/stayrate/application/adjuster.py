# src/stayrate/application/adjuster.py
"""
Channel/Discount Adjuster - Pure Rate Transforms

This module holds the multiplicative transforms applied on top of a
per-night or per-ticket rate:
- age-band multiplier (tickets), always before the channel coefficient
- channel coefficient: rate * (1 + coefficient)
- early-bird then group discount, both in percentage points

Files that USE this module:
- stayrate.application.economics (composes these into period pricing)
- tests.test_adjuster (unit tests)

Files that this module USES:
- stayrate.domain.enums (coefficient tables and key parsing)
- stayrate.domain.errors (InvalidPricingInputError)
"""
from __future__ import annotations

from stayrate.domain.enums import (
    AGE_BAND_MULTIPLIERS,
    CHANNEL_COEFFICIENTS,
    AgeBand,
    Channel,
    parse_age_band,
    parse_channel,
)
from stayrate.domain.errors import InvalidPricingInputError
from stayrate.shared.validators import is_percentage_points


def channel_coefficient(channel: Channel | str) -> float:
    """Signed markup/discount fraction for a channel."""
    return CHANNEL_COEFFICIENTS[parse_channel(channel)]


def age_band_multiplier(age_band: AgeBand | str) -> float:
    """Price multiplier for a ticket age band."""
    return AGE_BAND_MULTIPLIERS[parse_age_band(age_band)]


def apply_channel_adjustment(rate: float, channel: Channel | str) -> float:
    """
    Apply the channel coefficient to a rate.

    Args:
        rate: Rate before the channel adjustment
        channel: Sales channel (member or key such as "b2b")

    Returns:
        rate * (1 + channel coefficient)

    Raises:
        UnknownEnumValueError: If channel is not a known key
    """
    return rate * (1 + channel_coefficient(channel))


def apply_age_band(rate: float, age_band: AgeBand | str) -> float:
    """Apply the age-band multiplier to a ticket base rate."""
    return rate * age_band_multiplier(age_band)


def price_ticket_unit(base_rate: float, age_band: AgeBand | str, channel: Channel | str) -> float:
    """Age-band multiplier first, then channel coefficient."""
    return apply_channel_adjustment(apply_age_band(base_rate, age_band), channel)


def apply_discounts(rate: float, early_bird_pct: float, group_pct: float) -> tuple[float, float]:
    """
    Apply the early-bird discount, then the group discount.

    Args:
        rate: Rate after markup and channel adjustment
        early_bird_pct: Early-bird discount in percentage points
        group_pct: Group discount in percentage points

    Returns:
        (after_early_bird, after_group_discount)

    Raises:
        InvalidPricingInputError: If a discount is outside [0, 100]
    """
    if not is_percentage_points(early_bird_pct):
        raise InvalidPricingInputError(
            f"early-bird discount must be in [0, 100], got {early_bird_pct!r}"
        )
    if not is_percentage_points(group_pct):
        raise InvalidPricingInputError(
            f"group discount must be in [0, 100], got {group_pct!r}"
        )
    after_early_bird = rate * (1 - early_bird_pct / 100)
    after_group_discount = after_early_bird * (1 - group_pct / 100)
    return after_early_bird, after_group_discount
