"""
Storage Abstraction Layer
==========================

Provides a unified interface for image hosting operations (MinIO/S3).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface, UploadCallback
from .s3_adapter import S3StorageAdapter

__all__ = [
    "StorageInterface",
    "StorageFile",
    "StorageException",
    "UploadCallback",
    "S3StorageAdapter",
    "StorageFactory",
]
