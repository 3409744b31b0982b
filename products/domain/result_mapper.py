"""
Result mapper: converts pipeline outcomes into the response envelope.

Success:  {"success": true, "product": {...}, "price": {...}}, 200
Failure:  {"error": "<message>"}, 400 or 500
"""

import logging
from typing import Any, Dict, Tuple

from .draft import IngestionResult
from .exceptions import IngestionError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error"

Envelope = Tuple[Dict[str, Any], int]


class ResultMapper:
    """Map an IngestionResult or an exception to (payload, status)."""

    @staticmethod
    def success(result: IngestionResult) -> Envelope:
        return {
            "success": True,
            "product": result.product.to_dict(),
            "price": result.price.to_dict(),
        }, 200

    @staticmethod
    def failure(error: BaseException) -> Envelope:
        if isinstance(error, IngestionError):
            return {"error": error.message or type(error).__name__}, error.status_code

        logger.error(f"Unexpected product ingestion failure: {error!r}")
        return {"error": UNEXPECTED_ERROR_MESSAGE}, 500
