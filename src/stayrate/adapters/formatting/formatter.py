# src/stayrate/adapters/formatting/formatter.py
"""
Quote Formatter - Text Rendering of Price Breakdowns

This module renders PriceBreakdown objects as the plain-text summaries the
simulator panels show: rate periods, markup and discount lines, subtotal,
taxes and fees, VAT, total and the supplier-side margin view. Rounding
happens here only, half-up via decimal; the engine never rounds.

Files that USE this module:
- stayrate.app (prints simulator scenario results)
- tests.test_formatter (unit tests)

Files that this module USES:
- stayrate.domain.models (PriceBreakdown, PeriodPrice)
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from stayrate.domain.models import PeriodPrice, PriceBreakdown


def round_money(value: float, decimals: int = 2) -> Decimal:
    """
    Round an amount half-up for display.

    Args:
        value: Amount to round
        decimals: Number of decimal places (default: 2)

    Returns:
        Decimal rounded to decimals places (e.g. 116.666... -> Decimal('116.67'))
    """
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_money(value: float, currency: str, decimals: int = 2) -> str:
    """Format an amount with its currency, e.g. 'AED 320.00'."""
    return f"{currency} {round_money(value, decimals):,.{decimals}f}"


def _fmt_pct(fraction: float) -> str:
    """Format a fraction as a signed percentage, e.g. 0.6 -> '+60.0%'."""
    pct = fraction * 100
    sign = "+" if pct > 0 else ""
    return f"{sign}{pct:.1f}%"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def format_period_line(price: PeriodPrice, decimals: int = 2) -> str:
    """
    Format one rate period, e.g. '2026-03-01 → 2026-03-03 (2 nights) @ AED 100.00'.
    """
    period = price.period
    return (
        f"{period.start_date.isoformat()} → {period.end_date.isoformat()} "
        f"({_plural(period.nights_or_units, 'night')}) "
        f"@ {format_money(price.base_rate, price.currency, decimals)}"
    )


def format_breakdown(
    breakdown: PriceBreakdown,
    decimals: int = 2,
    title: Optional[str] = None,
    unit_label: str = "night",
) -> str:
    """
    Render a full price breakdown as text.

    Zero-value optional lines (add-on, discounts, city tax, resort fee and
    its tax, room tax, service fees, pay-at-property fees) are omitted.

    Args:
        breakdown: Engine output to render
        decimals: Decimal places for amounts (default: 2)
        title: Optional heading line
        unit_label: "night" for stays, "ticket" for tickets

    Returns:
        Multi-line string
    """
    cur = breakdown.currency
    units = breakdown.nights_or_units

    def money(value: float) -> str:
        return format_money(value, cur, decimals)

    lines: List[str] = []
    if title:
        lines.append(title)

    if unit_label == "night" and len(breakdown.periods) > 1:
        lines.append("Rate periods:")
        lines.extend(f"  {format_period_line(p, decimals)}" for p in breakdown.periods)
        lines.append(f"Average base rate: {money(breakdown.base_rate)}")
    else:
        lines.append(f"Base rate: {money(breakdown.base_rate)}")

    if breakdown.board_or_add_on_cost > 0:
        lines.append(f"Add-on (per {unit_label}): {money(breakdown.board_or_add_on_cost)}")

    markups = {p.markup_pct for p in breakdown.periods}
    if len(markups) > 1:
        # periods carry different overrides; the weighted rate has no single percentage
        lines.append(f"Markup (average): {money(breakdown.marked_up_rate)}")
    elif markups.pop() > 0:
        lines.append(f"Markup ({_fmt_pct(breakdown.periods[0].markup_pct)}): {money(breakdown.marked_up_rate)}")

    channel_adjusted = breakdown.channel_adjusted_rate
    if abs(channel_adjusted - breakdown.marked_up_rate) > 1e-9:
        lines.append(f"Channel adjusted: {money(channel_adjusted)}")

    early_bird_saving = (channel_adjusted - breakdown.after_early_bird) * units
    if early_bird_saving > 0:
        lines.append(f"Early bird: -{money(early_bird_saving)}")

    group_saving = (breakdown.after_early_bird - breakdown.after_group_discount) * units
    if group_saving > 0:
        lines.append(f"Group discount: -{money(group_saving)}")

    lines.append(f"Subtotal ({_plural(units, unit_label)}): {money(breakdown.subtotal)}")

    fees = breakdown.taxes_and_fees
    if fees.city_tax > 0:
        lines.append(f"City tax: {money(fees.city_tax)}")
    if fees.resort_fee > 0:
        lines.append(f"Resort fee: {money(fees.resort_fee)}")
    if fees.resort_fee_tax > 0:
        lines.append(f"Resort fee tax: {money(fees.resort_fee_tax)}")
    if fees.room_tax > 0:
        lines.append(f"Room tax: {money(fees.room_tax)}")
    if fees.service_fees > 0:
        lines.append(f"Service fees: {money(fees.service_fees)}")
    lines.append(f"Customer VAT: {money(fees.customer_vat)}")
    lines.append(f"Total: {money(breakdown.total)}")
    if fees.fees_at_property > 0:
        lines.append(f"Payable at property: {money(fees.fees_at_property)}")

    supplier = breakdown.supplier_side
    lines.append(
        f"Supplier commission: {money(supplier.commission)}, "
        f"supplier VAT: {money(supplier.supplier_vat)}"
    )
    lines.append(f"Margin: {money(breakdown.margin_estimate)} ({breakdown.margin_pct:.1f}%)")
    return "\n".join(lines)
