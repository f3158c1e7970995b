# src/stayrate/application/__init__.py
"""
Application Layer - Pricing Engine and Services

This package contains the pricing pipeline (resolver, economics
calculator, aggregator, channel/discount adjuster) and the services that
compose it. No I/O; every function is pure.
"""

from stayrate.application.adjuster import (
    apply_age_band,
    apply_channel_adjustment,
    apply_discounts,
    price_ticket_unit,
)
from stayrate.application.aggregator import aggregate
from stayrate.application.availability import check_availability
from stayrate.application.economics import price_period
from stayrate.application.policies import find_applicable_policy, gross_rate
from stayrate.application.profit import best_supplier_for_pool, booking_profit
from stayrate.application.quote_service import QuoteService, quote_service
from stayrate.application.resolver import resolve_periods, resolve_single, select_rate

__all__ = [
    "resolve_periods",
    "resolve_single",
    "select_rate",
    "price_period",
    "aggregate",
    "apply_channel_adjustment",
    "apply_age_band",
    "apply_discounts",
    "price_ticket_unit",
    "find_applicable_policy",
    "gross_rate",
    "check_availability",
    "booking_profit",
    "best_supplier_for_pool",
    "QuoteService",
    "quote_service",
]
