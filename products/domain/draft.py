"""
Draft types produced by the form decoder and validator.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, Optional

from infrastructure.commerce import CatalogPrice, CatalogProduct

# size label -> measurement name -> value
SizeMeasurements = Dict[str, Dict[str, str]]

SIZE_METADATA_PREFIX = "size_"


@dataclass
class ImagePayload:
    """Raw image bytes captured from the multipart submission."""

    content: bytes
    filename: str = ""
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class DraftProduct:
    """
    A decoded, not yet validated, product submission.

    Text fields hold the raw submitted value, or None when the field was absent.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    stock: Optional[str] = None
    category: Optional[str] = None
    image: Optional[ImagePayload] = None
    sizes: SizeMeasurements = field(default_factory=dict)


@dataclass
class NormalizedDraft:
    """
    A validated draft, ready to be written to the commerce platform.

    Attributes:
        unit_amount: Price in minor currency units (always > 0)
        stock: Stock count as a string ("0" when not submitted)
        category: Category name ("" when not submitted)
    """

    name: str
    description: str
    unit_amount: int
    stock: str
    category: str
    image: Optional[ImagePayload] = None
    sizes: SizeMeasurements = field(default_factory=dict)

    def metadata(self) -> Dict[str, str]:
        """
        Flatten stock, category and sizes into commerce metadata.

        Each size becomes a ``size_<SIZE>`` entry holding its measurements as compact JSON.
        """
        metadata = {
            "stock": self.stock,
            "category": self.category,
        }
        for size, measurements in self.sizes.items():
            metadata[f"{SIZE_METADATA_PREFIX}{size}"] = json.dumps(
                measurements, ensure_ascii=False, separators=(",", ":")
            )
        return metadata


def sizes_from_metadata(metadata: Dict[str, str]) -> SizeMeasurements:
    """Rebuild the size-measurement map from product metadata."""
    sizes = {}
    for key, value in metadata.items():
        if key.startswith(SIZE_METADATA_PREFIX) and len(key) > len(SIZE_METADATA_PREFIX):
            sizes[key[len(SIZE_METADATA_PREFIX):]] = {str(k): str(v) for k, v in json.loads(value).items()}
    return sizes


@dataclass
class IngestionResult:
    """Records created for one successful submission."""

    product: CatalogProduct
    price: CatalogPrice
    image_url: Optional[str] = None
