"""
Product ingestion domain: decoding, validation, image upload and catalog writes.
"""

from .catalog_writer import CatalogWriter
from .config import IngestionConfig
from .draft import DraftProduct, ImagePayload, IngestionResult, NormalizedDraft, sizes_from_metadata
from .exceptions import CatalogError, ConfigError, IngestionError, UploadError, ValidationError
from .form_decoder import SIZE_FIELD_SCHEMA, FormDecoder, parse_size_field
from .ingestion_service import ProductIngestionService
from .media_uploader import MediaUploader, SingleSettlementFuture, UploadTimeoutError
from .result_mapper import ResultMapper
from .validator import DraftValidator

__all__ = [
    "CatalogWriter",
    "IngestionConfig",
    "DraftProduct",
    "ImagePayload",
    "IngestionResult",
    "NormalizedDraft",
    "sizes_from_metadata",
    "IngestionError",
    "ConfigError",
    "ValidationError",
    "UploadError",
    "CatalogError",
    "SIZE_FIELD_SCHEMA",
    "FormDecoder",
    "parse_size_field",
    "ProductIngestionService",
    "MediaUploader",
    "SingleSettlementFuture",
    "UploadTimeoutError",
    "ResultMapper",
    "DraftValidator",
]
