"""
Commerce Provider Interface
============================

Abstract base class defining the contract for catalog operations on the
commerce platform (products, prices and the link between them).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CatalogProduct:
    """
    Represents a product record held by the commerce platform.

    Attributes:
        product_id: Opaque identifier assigned by the platform
        name: Product name
        description: Product description
        images: Public image URLs (zero or one entry)
        metadata: Flat string-to-string metadata
        default_price: Identifier of the default price, once attached
        active: Whether the product is available for sale
        created: Creation timestamp (unix seconds)
    """

    product_id: str
    name: str
    description: str
    images: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)
    default_price: Optional[str] = None
    active: bool = True
    created: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.product_id,
            "object": "product",
            "name": self.name,
            "description": self.description,
            "images": list(self.images),
            "metadata": dict(self.metadata),
            "default_price": self.default_price,
            "active": self.active,
            "created": self.created,
        }


@dataclass
class CatalogPrice:
    """
    Represents a price record held by the commerce platform.

    Attributes:
        price_id: Opaque identifier assigned by the platform
        product_id: Identifier of the owning product
        unit_amount: Amount in smallest currency unit (cents)
        currency: ISO currency code (lowercase)
        active: Whether the price can be used for new purchases
        created: Creation timestamp (unix seconds)
    """

    price_id: str
    product_id: str
    unit_amount: int
    currency: str
    active: bool = True
    created: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.price_id,
            "object": "price",
            "product": self.product_id,
            "unit_amount": self.unit_amount,
            "currency": self.currency,
            "active": self.active,
            "created": self.created,
        }


class CommerceProviderInterface(ABC):
    """
    Abstract interface for commerce platform catalog operations.

    Concrete implementations:
        - StripeCommerceProvider: Stripe products and prices
    """

    @abstractmethod
    def create_product(
        self,
        name: str,
        description: str,
        images: List[str],
        metadata: Dict[str, str],
    ) -> CatalogProduct:
        """
        Create a product.

        Args:
            name: Product name
            description: Product description
            images: Public image URLs
            metadata: Flat string-to-string metadata

        Returns:
            CatalogProduct as stored by the platform

        Raises:
            CommerceException: If creation fails
        """
        pass

    @abstractmethod
    def create_price(self, product_id: str, unit_amount: int, currency: str) -> CatalogPrice:
        """
        Create a one-off price for a product.

        Args:
            product_id: Owning product identifier
            unit_amount: Amount in smallest currency unit
            currency: ISO currency code

        Returns:
            CatalogPrice as stored by the platform

        Raises:
            CommerceException: If creation fails
        """
        pass

    @abstractmethod
    def set_default_price(self, product_id: str, price_id: str) -> CatalogProduct:
        """
        Point a product's default price at an existing price.

        Args:
            product_id: Product identifier
            price_id: Price identifier

        Returns:
            Updated CatalogProduct

        Raises:
            CommerceException: If the update fails
        """
        pass


class CommerceException(Exception):
    """
    Base exception for commerce platform operations.

    Attributes:
        caller_error: True when the platform rejected the request data,
            False when the platform itself (or the connection) failed
    """

    def __init__(self, message: str, caller_error: bool = False):
        super().__init__(message)
        self.caller_error = caller_error
