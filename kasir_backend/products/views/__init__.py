# products/views/__init__.py

"""
Products views package exports.

Purpose:
- Central export point for router imports (CategoryViewSet, ProductViewSet).
"""

from .category import CategoryViewSet
from .product import ProductViewSet

__all__ = [
    "CategoryViewSet",
    "ProductViewSet",
]
