# src/stayrate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters between the pricing engine and its
consumers:
- Formatting (simulator text output)
"""

__all__ = []
