"""
Commerce Provider Factory
==========================

Factory pattern for creating commerce provider instances.
"""

import logging
from typing import Literal, Optional

from .interface import CommerceProviderInterface
from .stripe_provider import StripeCommerceProvider

logger = logging.getLogger(__name__)

CommerceBackend = Literal["stripe"]


class CommerceFactory:
    """
    Factory for creating commerce provider instances.

    Usage:
        provider = CommerceFactory.create(api_key="sk_live_...")
    """

    @staticmethod
    def create(backend: Optional[CommerceBackend] = None, **options) -> CommerceProviderInterface:
        """
        Create a commerce provider instance.

        Args:
            backend: Commerce backend type (only 'stripe' is supported)
            **options: Provider credentials and options

        Returns:
            CommerceProviderInterface implementation

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or "stripe"

        logger.info(f"Creating commerce provider: {backend_type}")

        if backend_type == "stripe":
            return StripeCommerceProvider(**options)

        raise ValueError(f"Invalid commerce backend: {backend_type}. Must be 'stripe'")

    @staticmethod
    def create_stripe(**options) -> StripeCommerceProvider:
        """
        Create Stripe provider explicitly.

        Returns:
            StripeCommerceProvider instance
        """
        return StripeCommerceProvider(**options)
