# src/stayrate/shared/validators.py
"""
Input Validation Utilities - Numeric and Code Validation

This module provides the predicate functions used to validate pricing
inputs at the engine boundary and settings values at load time. Every
predicate returns a bool; callers decide which exception to raise.

Files that USE this module:
- stayrate.domain.models (value object __post_init__ checks)
- stayrate.application.adjuster (discount range checks)
- stayrate.application.economics, policies, availability (raw argument checks)
- stayrate.config.settings (currency code validation)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re


def is_finite_number(value) -> bool:
    """
    Check that value is a real, finite number (bools are rejected).

    Args:
        value: Value to check

    Returns:
        True if value is an int or float that is neither NaN nor infinite
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_non_negative(value) -> bool:
    """Check that value is a finite number >= 0."""
    return is_finite_number(value) and value >= 0


def is_fraction(value) -> bool:
    """
    Check that value is a rate expressed as a fraction.

    Args:
        value: Value to check (e.g. 0.6 for 60%)

    Returns:
        True if 0 <= value <= 1
    """
    return is_finite_number(value) and 0 <= value <= 1


def is_percentage_points(value) -> bool:
    """
    Check that value is a rate expressed in percentage points.

    Args:
        value: Value to check (e.g. 5 for 5%)

    Returns:
        True if 0 <= value <= 100
    """
    return is_finite_number(value) and 0 <= value <= 100


def is_count(value, minimum: int = 0) -> bool:
    """Check that value is an int (not bool) of at least minimum."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= minimum


def validate_currency_code(code: str) -> bool:
    """
    Validate an ISO 4217 style currency code.

    Args:
        code: Currency code to validate (e.g. "AED", "GBP")

    Returns:
        True if code is three uppercase letters, False otherwise
    """
    if not code:
        return False
    return bool(re.match(r'^[A-Z]{3}$', code))
