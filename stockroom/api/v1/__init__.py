"""
API v1 Package

Version 1 REST endpoints: health, products, procurement, inventory.
"""

from . import health, inventory, procurement, products

__all__ = ["health", "inventory", "procurement", "products"]
