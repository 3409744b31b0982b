"""
ProductIngestionService - multipart submission to priced catalog entry

Pipeline per submission:
    FormDecoder -> DraftValidator -> MediaUploader (only with an image)
    -> CatalogWriter -> ResultMapper

Each submission is independent. Remote calls run strictly one after the
other and are never retried.
"""

from typing import Mapping, Optional

from ..infra.observability.metrics import product_submissions_total
from ..infra.observability.tracing import add_span_attributes, get_tracer
from .base import BaseService
from .catalog_writer import CatalogWriter
from .draft import IngestionResult
from .exceptions import ConfigError, IngestionError
from .form_decoder import FormDecoder
from .media_uploader import MediaUploader
from .result_mapper import Envelope, ResultMapper
from .validator import DraftValidator

tracer = get_tracer(__name__)


class ProductIngestionService(BaseService):
    """
    Orchestrates one product creation submission.

    Args:
        catalog_writer: Writes product and price to the commerce platform
        media_uploader: Uploads images; None disables image submissions
        decoder: Multipart form decoder
        validator: Draft validator
    """

    def __init__(
        self,
        catalog_writer: CatalogWriter,
        media_uploader: Optional[MediaUploader] = None,
        decoder: Optional[FormDecoder] = None,
        validator: Optional[DraftValidator] = None,
    ):
        super().__init__()
        self.catalog_writer = catalog_writer
        self.media_uploader = media_uploader
        self.decoder = decoder or FormDecoder()
        self.validator = validator or DraftValidator()

    @BaseService.log_performance
    def ingest(self, data: Mapping, files: Optional[Mapping] = None) -> IngestionResult:
        """
        Run the pipeline and return the created records.

        Raises:
            ValidationError: Bad or missing input (no remote call made)
            UploadError: Image upload failed (no catalog call made)
            CatalogError: A commerce platform call failed
            ConfigError: An image was submitted but no uploader is configured
        """
        with tracer.start_as_current_span("product_ingest") as span:
            draft = self.decoder.decode(data, files)
            add_span_attributes(span, has_image=draft.image is not None, sizes_count=len(draft.sizes))

            normalized = self.validator.validate(draft)

            image_url = None
            if normalized.image is not None:
                if self.media_uploader is None:
                    raise ConfigError("Image hosting is not configured")
                image_url = self.media_uploader.upload(normalized.image)

            product, price = self.catalog_writer.write(normalized, image_url)
            add_span_attributes(span, product_id=product.product_id, price_id=price.price_id)

            return IngestionResult(product=product, price=price, image_url=image_url)

    def handle(self, data: Mapping, files: Optional[Mapping] = None) -> Envelope:
        """
        Run the pipeline and always return a response envelope.

        Returns:
            (payload, status_code)
        """
        try:
            result = self.ingest(data, files)
        except IngestionError as e:
            product_submissions_total.labels(outcome=type(e).__name__).inc()
            return ResultMapper.failure(e)
        except Exception as e:
            product_submissions_total.labels(outcome="UnexpectedError").inc()
            return ResultMapper.failure(e)

        product_submissions_total.labels(outcome="success").inc()
        return ResultMapper.success(result)
