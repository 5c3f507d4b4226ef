"""
==============================================================================
Stockroom - Inventory Management Service
==============================================================================

In-memory product catalog with procurement, low stock notices and
statistics, served over a small FastAPI application.

==============================================================================
"""

__version__ = "1.0.0"
