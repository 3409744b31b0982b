"""
Commerce Platform Abstraction Layer
====================================

Provides a unified interface for catalog operations (products and prices) on the commerce platform.
"""

from .factory import CommerceFactory
from .interface import CatalogPrice, CatalogProduct, CommerceException, CommerceProviderInterface
from .stripe_provider import StripeCommerceProvider

__all__ = [
    "CommerceProviderInterface",
    "CatalogProduct",
    "CatalogPrice",
    "CommerceException",
    "StripeCommerceProvider",
    "CommerceFactory",
]
