"""
Commerce Infrastructure Tests
==============================

Unit tests for the commerce platform abstraction layer.
"""

from unittest.mock import MagicMock, patch

import stripe
from django.test import TestCase

from infrastructure.commerce import (
    CatalogPrice,
    CatalogProduct,
    CommerceException,
    CommerceFactory,
    CommerceProviderInterface,
    StripeCommerceProvider,
)


def stripe_product(**overrides):
    product = MagicMock()
    product.id = "prod_test_123"
    product.name = "Dress A"
    product.description = "desc"
    product.images = []
    product.metadata = {"stock": "3", "category": "Vestidos"}
    product.default_price = None
    product.active = True
    product.created = 1700000000
    for key, value in overrides.items():
        setattr(product, key, value)
    return product


def stripe_price(**overrides):
    price = MagicMock()
    price.id = "price_test_123"
    price.product = "prod_test_123"
    price.unit_amount = 4990
    price.currency = "brl"
    price.active = True
    price.created = 1700000001
    for key, value in overrides.items():
        setattr(price, key, value)
    return price


class CommerceInterfaceTest(TestCase):
    """Test CommerceProviderInterface contract."""

    def test_interface_is_abstract(self):
        """CommerceProviderInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            CommerceProviderInterface()


class StripeCommerceProviderTest(TestCase):
    """Test StripeCommerceProvider implementation."""

    def setUp(self):
        """Set up test fixtures."""
        self.provider = StripeCommerceProvider(api_key="sk_test_fake")

    def test_requires_api_key(self):
        with self.assertRaises(ValueError):
            StripeCommerceProvider(api_key="")

    @patch("stripe.Product.create")
    def test_create_product_success(self, mock_create):
        """Test successful product creation."""
        mock_create.return_value = stripe_product(images=["https://cdn.example.com/produtos/a.png"])

        result = self.provider.create_product(
            name="Dress A",
            description="desc",
            images=["https://cdn.example.com/produtos/a.png"],
            metadata={"stock": "3", "category": "Vestidos"},
        )

        self.assertIsInstance(result, CatalogProduct)
        self.assertEqual(result.product_id, "prod_test_123")
        self.assertEqual(result.images, ["https://cdn.example.com/produtos/a.png"])
        self.assertEqual(result.metadata["category"], "Vestidos")
        self.assertIsNone(result.default_price)

        kwargs = mock_create.call_args.kwargs
        self.assertEqual(kwargs["api_key"], "sk_test_fake")
        self.assertEqual(kwargs["metadata"], {"stock": "3", "category": "Vestidos"})

    @patch("stripe.Product.create")
    def test_create_product_does_not_touch_global_key(self, mock_create):
        """The secret key is sent per request."""
        mock_create.return_value = stripe_product()
        previous = stripe.api_key

        self.provider.create_product("Dress A", "desc", [], {})

        self.assertEqual(stripe.api_key, previous)

    @patch("stripe.Product.create")
    def test_create_product_invalid_request(self, mock_create):
        """Rejected request data is flagged as a caller error."""
        mock_create.side_effect = stripe.InvalidRequestError("Invalid URL: not-a-url", param="images")

        with self.assertRaises(CommerceException) as ctx:
            self.provider.create_product("Dress A", "desc", ["not-a-url"], {})

        self.assertTrue(ctx.exception.caller_error)
        self.assertIn("Invalid URL", str(ctx.exception))

    @patch("stripe.Product.create")
    def test_create_product_connection_error(self, mock_create):
        """Network failures are flagged as remote errors."""
        mock_create.side_effect = stripe.APIConnectionError("Network error")

        with self.assertRaises(CommerceException) as ctx:
            self.provider.create_product("Dress A", "desc", [], {})

        self.assertFalse(ctx.exception.caller_error)

    @patch("stripe.Product.create")
    def test_create_product_authentication_error(self, mock_create):
        mock_create.side_effect = stripe.AuthenticationError("Invalid API Key provided")

        with self.assertRaises(CommerceException) as ctx:
            self.provider.create_product("Dress A", "desc", [], {})

        self.assertFalse(ctx.exception.caller_error)

    @patch("stripe.Price.create")
    def test_create_price_success(self, mock_create):
        """Test successful price creation."""
        mock_create.return_value = stripe_price()

        result = self.provider.create_price("prod_test_123", 4990, "BRL")

        self.assertIsInstance(result, CatalogPrice)
        self.assertEqual(result.price_id, "price_test_123")
        self.assertEqual(result.product_id, "prod_test_123")
        self.assertEqual(result.unit_amount, 4990)
        mock_create.assert_called_once_with(
            product="prod_test_123",
            unit_amount=4990,
            currency="brl",
            api_key="sk_test_fake",
        )

    @patch("stripe.Price.create")
    def test_create_price_failure(self, mock_create):
        mock_create.side_effect = stripe.APIError("Internal server error")

        with self.assertRaises(CommerceException) as ctx:
            self.provider.create_price("prod_test_123", 4990, "brl")

        self.assertFalse(ctx.exception.caller_error)

    @patch("stripe.Product.modify")
    def test_set_default_price_success(self, mock_modify):
        """Test attaching the default price."""
        mock_modify.return_value = stripe_product(default_price="price_test_123")

        result = self.provider.set_default_price("prod_test_123", "price_test_123")

        self.assertEqual(result.default_price, "price_test_123")
        mock_modify.assert_called_once_with("prod_test_123", default_price="price_test_123", api_key="sk_test_fake")

    @patch("stripe.Product.modify")
    def test_set_default_price_expanded_object(self, mock_modify):
        """An expanded default price is reduced to its id."""
        expanded = MagicMock()
        expanded.id = "price_test_123"
        mock_modify.return_value = stripe_product(default_price=expanded)

        result = self.provider.set_default_price("prod_test_123", "price_test_123")

        self.assertEqual(result.default_price, "price_test_123")

    @patch("stripe.Product.create")
    def test_stripe_version_is_forwarded(self, mock_create):
        mock_create.return_value = stripe_product()
        provider = StripeCommerceProvider(api_key="sk_test_fake", stripe_version="2025-07-30.basil")

        provider.create_product("Dress A", "desc", [], {})

        self.assertEqual(mock_create.call_args.kwargs["stripe_version"], "2025-07-30.basil")


class CatalogRecordTest(TestCase):
    """Test record serialization."""

    def test_product_to_dict(self):
        product = CatalogProduct(
            product_id="prod_1",
            name="Dress A",
            description="desc",
            metadata={"stock": "3"},
            default_price="price_1",
        )

        data = product.to_dict()

        self.assertEqual(data["id"], "prod_1")
        self.assertEqual(data["object"], "product")
        self.assertEqual(data["images"], [])
        self.assertEqual(data["default_price"], "price_1")

    def test_price_to_dict(self):
        price = CatalogPrice(price_id="price_1", product_id="prod_1", unit_amount=4990, currency="brl")

        data = price.to_dict()

        self.assertEqual(data["product"], "prod_1")
        self.assertEqual(data["unit_amount"], 4990)


class CommerceFactoryTest(TestCase):
    """Test CommerceFactory."""

    def test_create_default_provider(self):
        provider = CommerceFactory.create(api_key="sk_test_fake")
        self.assertIsInstance(provider, StripeCommerceProvider)

    def test_create_with_explicit_backend(self):
        provider = CommerceFactory.create("stripe", api_key="sk_test_fake")
        self.assertIsInstance(provider, StripeCommerceProvider)

    def test_create_invalid_backend(self):
        with self.assertRaises(ValueError):
            CommerceFactory.create("invalid", api_key="sk_test_fake")

    def test_create_stripe_explicit(self):
        provider = CommerceFactory.create_stripe(api_key="sk_test_fake")
        self.assertIsInstance(provider, StripeCommerceProvider)
