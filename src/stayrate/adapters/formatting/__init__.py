# src/stayrate/adapters/formatting/__init__.py
"""
Formatting Adapters - Quote Rendering

This package contains text formatting adapters for simulator output.
"""

from stayrate.adapters.formatting.formatter import (
    format_breakdown,
    format_money,
    format_period_line,
    round_money,
)

__all__ = [
    "format_breakdown",
    "format_money",
    "format_period_line",
    "round_money",
]
