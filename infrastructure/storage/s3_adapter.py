"""
S3 Storage Adapter
==================

Concrete implementation of StorageInterface using AWS S3 (or MinIO) via django-storages.
Credentials are passed in at construction instead of being read from global settings.
"""

import logging
import mimetypes
import os
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor
from io import BytesIO
from typing import BinaryIO, Optional

from storages.backends.s3boto3 import S3Boto3Storage

from .interface import StorageException, StorageFile, StorageInterface, UploadCallback

logger = logging.getLogger(__name__)

# Shared pool for streamed uploads
_upload_pool: Optional[ThreadPoolExecutor] = None
_upload_pool_lock = threading.Lock()


def get_upload_pool(max_workers: int = 4) -> ThreadPoolExecutor:
    """Return the process-wide thread pool used for streamed uploads."""
    global _upload_pool

    with _upload_pool_lock:
        if _upload_pool is None:
            _upload_pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="storage_upload")
            logger.info("Initialized storage upload thread pool")
    return _upload_pool


class S3StorageAdapter(StorageInterface):
    """
    AWS S3 storage implementation using django-storages.

    Args:
        bucket_name: S3 bucket name
        access_key: AWS access key id
        secret_key: AWS secret access key
        region_name: AWS region (optional)
        endpoint_url: Custom endpoint, e.g. a MinIO server (optional)
        custom_domain: Custom CDN domain used for public URLs (optional)
        executor: Executor running streamed uploads (defaults to the shared pool)
    """

    def __init__(
        self,
        bucket_name: str,
        access_key: str,
        secret_key: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        custom_domain: Optional[str] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        options = {
            "bucket_name": bucket_name,
            "access_key": access_key,
            "secret_key": secret_key,
            "default_acl": "public-read",
            "querystring_auth": False,
            "file_overwrite": False,
        }
        if region_name:
            options["region_name"] = region_name
        if endpoint_url:
            options["endpoint_url"] = endpoint_url
        if custom_domain:
            options["custom_domain"] = custom_domain

        self.storage = S3Boto3Storage(**options)
        self._bucket_name = bucket_name
        self._executor = executor

    def upload(
        self,
        file: BinaryIO,
        path: str,
        content_type: str,
    ) -> StorageFile:
        """
        Upload a file to S3.

        Args:
            file: Binary file object to upload
            path: S3 key (destination path)
            content_type: MIME type

        Returns:
            StorageFile with S3 metadata

        Raises:
            StorageException: If upload fails
        """
        try:
            saved_path = self.storage.save(path, file)
            size = self.storage.size(saved_path)
            url = self.storage.url(saved_path)

            logger.info(f"Successfully uploaded file to S3: {saved_path}")

            return StorageFile(
                key=saved_path,
                url=url,
                size=size,
                content_type=content_type,
                bucket=self._bucket_name,
            )

        except Exception as e:
            logger.error(f"Failed to upload file to S3: {path}. Error: {str(e)}")
            raise StorageException(f"S3 upload failed: {str(e)}") from e

    def upload_stream(
        self,
        data: bytes,
        folder: str,
        callback: UploadCallback,
        content_type: str = "application/octet-stream",
        filename: Optional[str] = None,
    ) -> None:
        key = self.build_key(folder, filename, content_type)

        def run():
            try:
                stored = self.upload(BytesIO(data), key, content_type)
            except Exception as e:
                callback(e, None)
            else:
                callback(None, stored)

        executor = self._executor or get_upload_pool()
        try:
            executor.submit(run)
        except RuntimeError as e:
            # Executor already shut down
            raise StorageException(f"Upload could not be scheduled: {str(e)}") from e

        logger.debug(f"Scheduled streamed upload to S3: {key} ({len(data)} bytes)")

    @staticmethod
    def build_key(folder: str, filename: Optional[str], content_type: str) -> str:
        """
        Build a unique object key under ``folder``.

        The extension comes from the original filename, or is guessed from
        the content type when the filename has none.
        """
        ext = os.path.splitext(filename or "")[1].lower()
        if not ext:
            ext = mimetypes.guess_extension(content_type or "") or ""
        return f"{folder.strip('/')}/{uuid.uuid4().hex}{ext}"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name
