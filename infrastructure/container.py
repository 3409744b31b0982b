"""
Dependency Injection Container
================================

Simple service locator for the ingestion pipeline and its infrastructure
dependencies. Services are built from an explicit IngestionConfig and
cached until the configuration changes.

Usage:
    from infrastructure.container import container

    service = container.ingestion_service(IngestionConfig.from_settings())
"""

import logging
from typing import Optional

from .commerce import CommerceFactory, CommerceProviderInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for infrastructure dependencies.

    Implements lazy initialization and caching of service instances.
    Singleton pattern.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize container (only once)."""
        if not self._initialized:
            self._config = None
            self._storage: Optional[StorageInterface] = None
            self._commerce: Optional[CommerceProviderInterface] = None
            self._ingestion_service = None

            self._initialized = True
            logger.info("Service container initialized")

    def configure(self, config) -> None:
        """
        Bind the container to a configuration.

        Cached services are dropped when the configuration differs from the current one.
        """
        if config != self._config:
            self.reset()
            self._config = config
            logger.info("Service container configured")

    def _require_config(self, config=None):
        if config is not None:
            self.configure(config)
        if self._config is None:
            from products.domain.config import IngestionConfig

            self.configure(IngestionConfig.from_settings())
        return self._config

    def storage(self, config=None) -> StorageInterface:
        """
        Get image hosting storage (S3/MinIO).

        Returns:
            StorageInterface implementation (cached)
        """
        config = self._require_config(config)
        if self._storage is None:
            self._storage = StorageFactory.create(
                bucket_name=config.aws_storage_bucket_name,
                access_key=config.aws_access_key_id,
                secret_key=config.aws_secret_access_key,
                region_name=config.aws_s3_region_name,
                endpoint_url=config.aws_s3_endpoint_url,
                custom_domain=config.aws_s3_custom_domain,
            )
            logger.debug(f"Created storage service: {type(self._storage).__name__}")

        return self._storage

    def commerce(self, config=None) -> CommerceProviderInterface:
        """
        Get commerce platform provider.

        Returns:
            CommerceProviderInterface implementation (cached)
        """
        config = self._require_config(config)
        if self._commerce is None:
            self._commerce = CommerceFactory.create(api_key=config.stripe_secret_key)
            logger.debug(f"Created commerce provider: {type(self._commerce).__name__}")

        return self._commerce

    def ingestion_service(self, config=None):
        """Get ProductIngestionService instance."""
        config = self._require_config(config)
        if self._ingestion_service is None:
            from products.domain import CatalogWriter, FormDecoder, MediaUploader, ProductIngestionService

            self._ingestion_service = ProductIngestionService(
                catalog_writer=CatalogWriter(self.commerce(), currency=config.currency),
                media_uploader=MediaUploader(
                    self.storage(),
                    folder=config.upload_folder,
                    timeout=config.upload_timeout,
                ),
                decoder=FormDecoder(max_image_bytes=config.max_image_bytes),
            )
            logger.debug("Created ProductIngestionService")
        return self._ingestion_service

    def reset(self):
        """
        Reset configuration and all cached service instances.

        Useful for testing or when credentials are rotated.
        """
        self._config = None
        self._storage = None
        self._commerce = None
        self._ingestion_service = None
        logger.info("Service container reset")


# Global singleton instance
container = ServiceContainer()
