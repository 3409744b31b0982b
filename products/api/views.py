import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.exceptions import APIException
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from infrastructure.container import container
from products.api.serializers import (
    ErrorResponseSerializer,
    ProductCreateRequestSerializer,
    ProductCreateResponseSerializer,
)
from products.domain import ConfigError, IngestionConfig, ResultMapper

logger = logging.getLogger(__name__)


class ProductCreateView(APIView):
    """
    Create a priced product on the commerce platform from an admin form submission.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="products_create",
        summary="Create a product",
        description=(
            "Creates the product on the commerce platform, creates its price and sets it as the "
            "default price. An optional image is uploaded to the image host first; if that upload "
            "fails no product is created."
        ),
        request={"multipart/form-data": ProductCreateRequestSerializer},
        responses={
            200: OpenApiResponse(response=ProductCreateResponseSerializer, description="Product created"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid submission"),
            415: OpenApiResponse(
                response=ErrorResponseSerializer, description="Body is not a multipart or urlencoded form"
            ),
            500: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Missing configuration, image upload failure or commerce platform error",
            ),
        },
        tags=["Products"],
    )
    def post(self, request, *args, **kwargs):
        # Credentials are checked before the body is parsed
        try:
            config = IngestionConfig.from_settings()
        except ConfigError as e:
            payload, status_code = ResultMapper.failure(e)
            return Response(payload, status=status_code)

        try:
            data, files = request.data, request.FILES
        except APIException as e:
            # Malformed or non-multipart body
            logger.warning(f"Rejected product submission body: {e.detail}")
            return Response({"error": str(e.detail)}, status=e.status_code)

        service = container.ingestion_service(config)
        payload, status_code = service.handle(data, files)

        if status_code == 200:
            logger.info(f"Product created: {payload['product']['id']}")
        return Response(payload, status=status_code)
