"""
FoodSaver food-inventory and waste-reduction package.

The package exposes the REST API, persistence layer, and helpers for tracking perishable
items, expiration alerts, recipe recommendations, and food-bank donations.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
