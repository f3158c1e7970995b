# src/stayrate/__init__.py
"""
StayRate - Multi-Channel Stay and Ticket Pricing Engine

A deterministic pricing engine for travel inventory (hotel stays, event
tickets, transfers, activities). Splits stays into rate periods, applies
contract economics, channel coefficients and discounts, and returns an
itemized price breakdown.
"""

__version__ = "1.0.0"
