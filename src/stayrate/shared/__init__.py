# src/stayrate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from stayrate.shared.validators import (
    is_count,
    is_finite_number,
    is_fraction,
    is_non_negative,
    is_percentage_points,
    validate_currency_code,
)

__all__ = [
    "is_finite_number",
    "is_non_negative",
    "is_fraction",
    "is_percentage_points",
    "is_count",
    "validate_currency_code",
]
