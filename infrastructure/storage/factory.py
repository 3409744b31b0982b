"""
Storage Factory
===============

Factory pattern for creating S3/MinIO storage instances.
Implements the Dependency Inversion Principle.
"""

import logging
from typing import Literal, Optional

from .interface import StorageInterface
from .s3_adapter import S3StorageAdapter

logger = logging.getLogger(__name__)

StorageBackend = Literal["s3"]


class StorageFactory:
    """
    Factory for creating the image hosting storage backend.

    Usage:
        storage = StorageFactory.create(
            bucket_name="catalog-images",
            access_key="...",
            secret_key="...",
        )
    """

    @staticmethod
    def create(backend: Optional[StorageBackend] = None, **options) -> StorageInterface:
        """
        Create a storage backend instance.

        Args:
            backend: Storage backend type (only 's3' is supported)
            **options: Backend-specific connection options

        Returns:
            StorageInterface implementation

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or "s3"

        logger.info(f"Creating storage backend: {backend_type}")

        if backend_type == "s3":
            return S3StorageAdapter(**options)

        raise ValueError(f"Invalid storage backend: {backend_type}. Must be 's3'")

    @staticmethod
    def create_s3(**options) -> S3StorageAdapter:
        """
        Create S3/MinIO storage backend explicitly.

        Returns:
            S3StorageAdapter instance
        """
        return S3StorageAdapter(**options)
