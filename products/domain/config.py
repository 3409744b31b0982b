"""
Runtime configuration for the ingestion pipeline.

Credentials are collected once from Django settings into an immutable value
that is handed to the storage and commerce providers at construction.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings as django_settings

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "brl"
DEFAULT_UPLOAD_FOLDER = "produtos"
DEFAULT_UPLOAD_TIMEOUT = 30.0
DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024

REQUIRED_SETTINGS = (
    "STRIPE_SECRET_KEY",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_STORAGE_BUCKET_NAME",
)


@dataclass(frozen=True)
class IngestionConfig:
    """
    Credentials and tunables for one ingestion pipeline.

    Attributes:
        stripe_secret_key: Commerce platform secret key
        aws_access_key_id: Image hosting access key
        aws_secret_access_key: Image hosting secret key
        aws_storage_bucket_name: Bucket receiving product images
        aws_s3_region_name: Bucket region (optional)
        aws_s3_endpoint_url: Custom S3 endpoint, e.g. MinIO (optional)
        aws_s3_custom_domain: CDN domain for public URLs (optional)
        currency: ISO currency code used for every price
        upload_folder: Folder product images are stored under
        upload_timeout: Seconds to wait for an image upload before failing
        max_image_bytes: Largest accepted image payload
    """

    stripe_secret_key: str
    aws_access_key_id: str
    aws_secret_access_key: str
    aws_storage_bucket_name: str
    aws_s3_region_name: Optional[str] = None
    aws_s3_endpoint_url: Optional[str] = None
    aws_s3_custom_domain: Optional[str] = None
    currency: str = DEFAULT_CURRENCY
    upload_folder: str = DEFAULT_UPLOAD_FOLDER
    upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT
    max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES

    @classmethod
    def from_settings(cls, settings=None) -> "IngestionConfig":
        """
        Build the configuration from Django settings.

        Raises:
            ConfigError: If any required credential is missing or blank
        """
        if settings is None:
            settings = django_settings

        missing = [name for name in REQUIRED_SETTINGS if not getattr(settings, name, None)]
        if missing:
            logger.error(f"Product ingestion is missing required settings: {', '.join(missing)}")
            raise ConfigError(f"Server misconfigured: missing {', '.join(missing)}", missing=missing)

        return cls(
            stripe_secret_key=settings.STRIPE_SECRET_KEY,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            aws_storage_bucket_name=settings.AWS_STORAGE_BUCKET_NAME,
            aws_s3_region_name=getattr(settings, "AWS_S3_REGION_NAME", None) or None,
            aws_s3_endpoint_url=getattr(settings, "AWS_S3_ENDPOINT_URL", None) or None,
            aws_s3_custom_domain=getattr(settings, "AWS_S3_CUSTOM_DOMAIN", None) or None,
            currency=(getattr(settings, "CATALOG_CURRENCY", None) or DEFAULT_CURRENCY).lower(),
            upload_folder=getattr(settings, "MEDIA_UPLOAD_FOLDER", None) or DEFAULT_UPLOAD_FOLDER,
            upload_timeout=float(getattr(settings, "MEDIA_UPLOAD_TIMEOUT", DEFAULT_UPLOAD_TIMEOUT)),
            max_image_bytes=int(getattr(settings, "PRODUCT_IMAGE_MAX_BYTES", DEFAULT_MAX_IMAGE_BYTES)),
        )
