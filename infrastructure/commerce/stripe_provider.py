"""
Stripe Commerce Provider
=========================

Concrete implementation of CommerceProviderInterface using Stripe products and prices.
"""

import logging
from typing import Dict, List, Optional

import stripe

from .interface import CatalogPrice, CatalogProduct, CommerceException, CommerceProviderInterface

logger = logging.getLogger(__name__)

# Errors caused by the data we sent rather than by Stripe or the network
CALLER_ERRORS = (stripe.InvalidRequestError, stripe.CardError)


class StripeCommerceProvider(CommerceProviderInterface):
    """
    Stripe catalog provider.

    The secret key is passed on every request instead of being assigned to
    the module-level ``stripe.api_key``, so several providers can coexist.

    Args:
        api_key: Stripe secret API key
        stripe_version: Optional pinned API version
    """

    def __init__(self, api_key: str, stripe_version: Optional[str] = None):
        if not api_key:
            raise ValueError("Stripe secret key is required")
        self.api_key = api_key
        self.stripe_version = stripe_version

    def _request_options(self) -> Dict[str, str]:
        options = {"api_key": self.api_key}
        if self.stripe_version:
            options["stripe_version"] = self.stripe_version
        return options

    def create_product(
        self,
        name: str,
        description: str,
        images: List[str],
        metadata: Dict[str, str],
    ) -> CatalogProduct:
        try:
            product = stripe.Product.create(
                name=name,
                description=description,
                images=images,
                metadata=metadata,
                **self._request_options(),
            )

            logger.info(f"Created Stripe product: {product.id}")
            return self._to_product(product)

        except stripe.StripeError as e:
            logger.error(f"Stripe product creation failed: {str(e)}")
            raise self._wrap(e) from e

    def create_price(self, product_id: str, unit_amount: int, currency: str) -> CatalogPrice:
        try:
            price = stripe.Price.create(
                product=product_id,
                unit_amount=unit_amount,
                currency=currency.lower(),
                **self._request_options(),
            )

            logger.info(f"Created Stripe price: {price.id} for product {product_id}")
            return self._to_price(price)

        except stripe.StripeError as e:
            logger.error(f"Stripe price creation failed for product {product_id}: {str(e)}")
            raise self._wrap(e) from e

    def set_default_price(self, product_id: str, price_id: str) -> CatalogProduct:
        try:
            product = stripe.Product.modify(
                product_id,
                default_price=price_id,
                **self._request_options(),
            )

            logger.info(f"Attached default price {price_id} to Stripe product {product_id}")
            return self._to_product(product)

        except stripe.StripeError as e:
            logger.error(f"Failed to attach default price {price_id} to {product_id}: {str(e)}")
            raise self._wrap(e) from e

    def _wrap(self, error: stripe.StripeError) -> CommerceException:
        """
        Convert a Stripe error into a CommerceException.

        Uses Stripe's user-facing message when there is one.
        """
        message = getattr(error, "user_message", None) or str(error) or type(error).__name__
        return CommerceException(message, caller_error=isinstance(error, CALLER_ERRORS))

    def _to_product(self, product) -> CatalogProduct:
        default_price = product.default_price
        # default_price is an id unless the request expanded it
        if default_price is not None and not isinstance(default_price, str):
            default_price = default_price.id

        return CatalogProduct(
            product_id=product.id,
            name=product.name,
            description=product.description or "",
            images=list(product.images or []),
            metadata={str(k): str(v) for k, v in (product.metadata or {}).items()},
            default_price=default_price,
            active=bool(product.active),
            created=product.created,
        )

    def _to_price(self, price) -> CatalogPrice:
        product_id = price.product
        if product_id is not None and not isinstance(product_id, str):
            product_id = product_id.id

        return CatalogPrice(
            price_id=price.id,
            product_id=product_id,
            unit_amount=price.unit_amount,
            currency=price.currency,
            active=bool(price.active),
            created=price.created,
        )
