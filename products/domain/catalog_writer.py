"""
Catalog writer: materializes a validated draft on the commerce platform.

Three dependent calls run in order: create the product, create its price,
then point the product's default price at it. There is no rollback. If
the second or third call fails, the product created by the first one is
left on the platform without a default price and is logged for cleanup.
"""

from typing import Callable, Optional, Tuple, TypeVar

from infrastructure.commerce import CatalogPrice, CatalogProduct, CommerceException, CommerceProviderInterface

from ..infra.observability.metrics import catalog_step_failures_total
from .base import BaseService
from .config import DEFAULT_CURRENCY
from .draft import NormalizedDraft
from .exceptions import CatalogError

T = TypeVar("T")

STEP_CREATE_PRODUCT = "create_product"
STEP_CREATE_PRICE = "create_price"
STEP_SET_DEFAULT_PRICE = "set_default_price"


class CatalogWriter(BaseService):
    """
    Write products and prices through a commerce provider.

    Args:
        provider: Commerce platform provider
        currency: ISO currency code used for every price
    """

    def __init__(self, provider: CommerceProviderInterface, currency: str = DEFAULT_CURRENCY):
        super().__init__()
        self.provider = provider
        self.currency = currency.lower()

    @BaseService.log_performance
    def write(self, draft: NormalizedDraft, image_url: Optional[str] = None) -> Tuple[CatalogProduct, CatalogPrice]:
        """
        Create the product, its price, and link them.

        Returns:
            (product with default price attached, price)

        Raises:
            CatalogError: If any step fails; later steps are not attempted
        """
        product = self._run_step(
            STEP_CREATE_PRODUCT,
            lambda: self.provider.create_product(
                name=draft.name,
                description=draft.description,
                images=[image_url] if image_url else [],
                metadata=draft.metadata(),
            ),
        )

        price = self._run_step(
            STEP_CREATE_PRICE,
            lambda: self.provider.create_price(
                product_id=product.product_id,
                unit_amount=draft.unit_amount,
                currency=self.currency,
            ),
            product_id=product.product_id,
        )

        product = self._run_step(
            STEP_SET_DEFAULT_PRICE,
            lambda: self.provider.set_default_price(product.product_id, price.price_id),
            product_id=product.product_id,
        )

        self.logger.info(
            f"Created catalog product {product.product_id} with price {price.price_id} "
            f"({price.unit_amount} {price.currency})"
        )
        return product, price

    def _run_step(self, step: str, call: Callable[[], T], product_id: Optional[str] = None) -> T:
        try:
            return call()
        except CommerceException as e:
            catalog_step_failures_total.labels(step=step).inc()
            if product_id:
                # No compensation: the product stays on the platform without a default price
                self.logger.warning(f"Catalog step '{step}' failed; product {product_id} left without a price")
            raise CatalogError(
                str(e),
                step=step,
                status_code=400 if e.caller_error else 500,
                product_id=product_id,
            ) from e
