"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from dataclasses import replace
from unittest.mock import MagicMock, patch

from django.test import TestCase, override_settings

from infrastructure.commerce import CommerceProviderInterface, StripeCommerceProvider
from infrastructure.container import ServiceContainer, container
from infrastructure.storage import S3StorageAdapter, StorageInterface
from products.domain import ConfigError, IngestionConfig, ProductIngestionService


def make_config(**overrides):
    config = IngestionConfig(
        stripe_secret_key="sk_test_fake",
        aws_access_key_id="test-key",
        aws_secret_access_key="test-secret",
        aws_storage_bucket_name="test-bucket",
    )
    return replace(config, **overrides)


class ServiceContainerTest(TestCase):
    """Test ServiceContainer implementation."""

    def setUp(self):
        """Reset container before each test."""
        container.reset()

    def tearDown(self):
        container.reset()

    def test_container_is_singleton(self):
        """Test that ServiceContainer is a singleton."""
        container1 = ServiceContainer()
        container2 = ServiceContainer()

        self.assertIs(container1, container2)
        self.assertIs(container1, container)

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_get_storage_service(self, mock_storage):
        """Test getting storage service from container."""
        mock_storage.return_value = MagicMock()

        storage = container.storage(make_config())

        self.assertIsInstance(storage, StorageInterface)
        self.assertIsInstance(storage, S3StorageAdapter)
        self.assertEqual(storage.bucket_name, "test-bucket")

        # Second call should return cached instance
        storage2 = container.storage()
        self.assertIs(storage, storage2)

    def test_get_commerce_service(self):
        """Test getting commerce provider from container."""
        commerce = container.commerce(make_config())

        self.assertIsInstance(commerce, CommerceProviderInterface)
        self.assertIsInstance(commerce, StripeCommerceProvider)
        self.assertEqual(commerce.api_key, "sk_test_fake")

        commerce2 = container.commerce()
        self.assertIs(commerce, commerce2)

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_get_ingestion_service(self, mock_storage):
        mock_storage.return_value = MagicMock()
        config = make_config(currency="usd", upload_folder="catalog", upload_timeout=5.0)

        service = container.ingestion_service(config)

        self.assertIsInstance(service, ProductIngestionService)
        self.assertEqual(service.catalog_writer.currency, "usd")
        self.assertEqual(service.media_uploader.folder, "catalog")
        self.assertEqual(service.media_uploader.timeout, 5.0)
        self.assertIs(service, container.ingestion_service(config))

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_changed_config_rebuilds_services(self, mock_storage):
        """Rotated credentials produce new provider instances."""
        mock_storage.return_value = MagicMock()

        first = container.ingestion_service(make_config())
        second = container.ingestion_service(make_config(stripe_secret_key="sk_test_rotated"))

        self.assertIsNot(first, second)
        self.assertEqual(container.commerce().api_key, "sk_test_rotated")

    @patch("infrastructure.storage.s3_adapter.S3Boto3Storage")
    def test_reset_container(self, mock_storage):
        """Test resetting container clears cached instances."""
        mock_storage.return_value = MagicMock()

        storage1 = container.storage(make_config())
        container.reset()
        storage2 = container.storage(make_config())

        self.assertIsNot(storage1, storage2)

    @override_settings(STRIPE_SECRET_KEY="")
    def test_unconfigured_container_reads_settings(self):
        """Without an explicit config, missing credentials raise ConfigError."""
        with self.assertRaises(ConfigError):
            container.commerce()
