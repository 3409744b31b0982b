"""
Storage Interface
=================

Abstract base class defining the contract for image hosting operations.
Implements the Interface Segregation Principle by providing only essential storage methods.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional


@dataclass
class StorageFile:
    """
    Represents a stored file with its metadata.

    Attributes:
        key: Unique identifier/path for the file
        url: Public URL to access the file
        size: File size in bytes
        content_type: MIME type of the file
        bucket: Storage bucket/container name (optional)
    """

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


# Completion signal for streamed uploads: exactly one of (error, result) is set.
UploadCallback = Callable[[Optional[BaseException], Optional[StorageFile]], None]


class StorageInterface(ABC):
    """
    Abstract interface for file storage operations.

    Concrete implementations:
        - S3StorageAdapter: AWS S3 / MinIO storage
    """

    @abstractmethod
    def upload(
        self,
        file: BinaryIO,
        path: str,
        content_type: str,
    ) -> StorageFile:
        """
        Upload a file to storage, blocking until it is stored.

        Args:
            file: Binary file object to upload
            path: Destination path/key in storage
            content_type: MIME type of the file

        Returns:
            StorageFile object with metadata

        Raises:
            StorageException: If upload fails
        """
        pass

    @abstractmethod
    def upload_stream(
        self,
        data: bytes,
        folder: str,
        callback: UploadCallback,
        content_type: str = "application/octet-stream",
        filename: Optional[str] = None,
    ) -> None:
        """
        Start a background upload of an in-memory buffer.

        The storage assigns the object key inside ``folder`` and reports
        completion through ``callback(error, result)``. The callback may be
        invoked from another thread, or before this method returns.

        Args:
            data: Raw bytes to store
            folder: Logical folder the object is placed under
            callback: Completion callback
            content_type: MIME type of the payload
            filename: Original filename, used to pick the key extension

        Raises:
            StorageException: If the upload cannot be started
        """
        pass

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """
        Get the storage bucket/container name.

        Returns:
            Bucket name string
        """
        pass


class StorageException(Exception):
    """Base exception for storage operations."""

    pass
