# src/stayrate/application/policies.py
"""
Pricing Policies - Offer-Level Markup Selection

This module prices an offer's net rate into a gross rate using the most
specific active pricing policy: offer-scoped beats channel-scoped beats
global. Policies with equal specificity keep their input order.

Strategies:
- markup_pct: markup = base_net * value / 100
- agent_commission: shown as markup, base_net * value / 100
- gross_fixed: markup = value - base_net (value is the gross price)

Files that USE this module:
- stayrate.application.quote_service (QuoteService.offer_gross_rate)
- tests.test_policies (unit tests)

Files that this module USES:
- stayrate.domain.models (PricingPolicy, PolicyQuote)
"""
from __future__ import annotations

from typing import Iterable, Optional

from stayrate.domain.enums import Channel, parse_channel
from stayrate.domain.errors import InvalidPricingInputError
from stayrate.domain.models import PolicyQuote, PricingPolicy
from stayrate.shared.validators import is_non_negative


def find_applicable_policy(
    policies: Iterable[PricingPolicy],
    channel: Channel | str,
    offer_id: Optional[str] = None,
) -> Optional[PricingPolicy]:
    """
    Find the most specific active policy for an offer sold on a channel.

    Args:
        policies: Candidate policies
        channel: Sales channel of the quote
        offer_id: Offer being priced, if any

    Returns:
        The applicable policy, or None if no policy matches
    """
    channel = parse_channel(channel)
    # sorted() is stable, so equal specificity keeps input order
    ranked = sorted(
        (p for p in policies if p.active),
        key=lambda p: p.specificity,
        reverse=True,
    )
    for policy in ranked:
        if policy.offer_id:
            if policy.offer_id == offer_id and policy.channel in (None, channel):
                return policy
            continue
        if policy.channel is None or policy.channel == channel:
            return policy
    return None


def policy_markup(base_net: float, policy: Optional[PricingPolicy]) -> float:
    """Markup amount a policy adds on top of base_net (0 without a policy)."""
    if policy is None:
        return 0.0
    if policy.strategy == "gross_fixed":
        return policy.value - base_net
    return base_net * policy.value / 100


def gross_rate(
    base_net: float,
    policies: Iterable[PricingPolicy],
    channel: Channel | str,
    offer_id: Optional[str] = None,
) -> PolicyQuote:
    """
    Price an offer's net rate into a gross rate.

    Raises:
        InvalidPricingInputError: If base_net is negative or the policy
            produces a negative gross rate
    """
    if not is_non_negative(base_net):
        raise InvalidPricingInputError(f"base net rate must be non-negative, got {base_net!r}")

    policy = find_applicable_policy(policies, channel, offer_id)
    markup = policy_markup(base_net, policy)
    gross = base_net + markup
    if gross < 0:
        raise InvalidPricingInputError(f"policy produces a negative gross rate ({gross})")

    return PolicyQuote(
        base_net=base_net,
        strategy=policy.strategy if policy else "none",
        value=policy.value if policy else 0.0,
        applied_markup=markup,
        gross_rate=gross,
    )
