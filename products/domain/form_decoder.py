"""
Form decoder: turns a multipart product submission into a DraftProduct.

No validation happens here. Missing text fields decode to None and
unrecognized fields are dropped; the validator decides what is an error.

Size keys split on the first underscore, so ``sizes[GG_comprimento_total]``
is size "GG", measure "comprimento_total" (the legacy form split on the last).
"""

import logging
import mimetypes
import os
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Pattern, Tuple

from .config import DEFAULT_MAX_IMAGE_BYTES
from .draft import DraftProduct, ImagePayload, SizeMeasurements

logger = logging.getLogger(__name__)

# Label used for measurements submitted without a size (legacy ``medidas[KEY]`` form)
ONE_SIZE_LABEL = "U"

# Accepted names per field, preferred name first
NAME_FIELDS = ("name",)
DESCRIPTION_FIELDS = ("description",)
PRICE_FIELDS = ("price",)
STOCK_FIELDS = ("stock", "estoque")
CATEGORY_FIELDS = ("category", "categoria")
IMAGE_FIELDS = ("photo", "foto")


@dataclass(frozen=True)
class SizeFieldRule:
    """
    One allow-listed family of dynamic measurement fields.

    ``pattern`` must define a ``measure`` group and may define a ``size``
    group; when it has no size group, ``default_size`` is used.
    """

    prefix: str
    pattern: Pattern
    default_size: Optional[str] = None

    def parse(self, key: str) -> Optional[Tuple[str, str]]:
        match = self.pattern.fullmatch(key)
        if match is None:
            return None
        groups = match.groupdict()
        size = groups.get("size") or self.default_size
        if not size:
            return None
        return size, groups["measure"]


SIZE_FIELD_SCHEMA = (
    # sizes[PP_busto] -> ("PP", "busto"); the size code never contains "_"
    SizeFieldRule("sizes", re.compile(r"sizes\[(?P<size>[A-Za-z0-9]+)_(?P<measure>\w+)\]")),
    # medidas[busto] -> ("U", "busto")
    SizeFieldRule("medidas", re.compile(r"medidas\[(?P<measure>\w+)\]"), default_size=ONE_SIZE_LABEL),
)


def parse_size_field(key: str, schema: Iterable[SizeFieldRule] = SIZE_FIELD_SCHEMA) -> Optional[Tuple[str, str]]:
    """Return (size, measurement) for a dynamic field name, or None if it is not one."""
    for rule in schema:
        if key.startswith(rule.prefix + "["):
            return rule.parse(key)
    return None


def _is_file(value: Any) -> bool:
    return callable(getattr(value, "read", None))


class FormDecoder:
    """
    Decode multipart form data into a DraftProduct.

    Args:
        max_image_bytes: Images larger than this are dropped
        schema: Allow-listed dynamic measurement field rules
    """

    def __init__(self, max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES, schema=SIZE_FIELD_SCHEMA):
        self.max_image_bytes = max_image_bytes
        self.schema = tuple(schema)

    def decode(self, data: Mapping, files: Optional[Mapping] = None) -> DraftProduct:
        """
        Decode a submission.

        Args:
            data: Form fields (a QueryDict or any mapping)
            files: Uploaded files; image fields are also looked up in ``data``

        Returns:
            DraftProduct with raw values
        """
        files = files or {}

        draft = DraftProduct(
            name=self._text(data, NAME_FIELDS),
            description=self._text(data, DESCRIPTION_FIELDS),
            price=self._text(data, PRICE_FIELDS),
            stock=self._text(data, STOCK_FIELDS),
            category=self._text(data, CATEGORY_FIELDS),
            image=self._image(files, data),
            sizes=self._sizes(data),
        )

        logger.info(
            f"Decoded product submission: name={draft.name!r} has_image={draft.image is not None} "
            f"sizes={len(draft.sizes)}"
        )
        return draft

    def _value(self, source: Mapping, key: str) -> Any:
        value = source.get(key)
        if isinstance(value, (list, tuple)):
            value = value[-1] if value else None
        return value

    def _text(self, data: Mapping, names: Tuple[str, ...]) -> Optional[str]:
        for name in names:
            if name not in data:
                continue
            value = self._value(data, name)
            if value is None or _is_file(value):
                continue
            return str(value)
        return None

    def _sizes(self, data: Mapping) -> SizeMeasurements:
        sizes: SizeMeasurements = {}
        for key in data.keys():
            parsed = parse_size_field(key, self.schema)
            if parsed is None:
                continue
            value = self._value(data, key)
            if value is None or _is_file(value):
                continue
            size, measure = parsed
            sizes.setdefault(size, {})[measure] = str(value)
        return sizes

    def _image(self, files: Mapping, data: Mapping) -> Optional[ImagePayload]:
        for name in IMAGE_FIELDS:
            for source in (files, data):
                upload = self._value(source, name) if name in source else None
                if _is_file(upload):
                    return self._read_image(name, upload)
        return None

    def _read_image(self, field_name: str, upload) -> Optional[ImagePayload]:
        declared_size = getattr(upload, "size", None)
        if isinstance(declared_size, int) and declared_size > self.max_image_bytes:
            logger.warning(
                f"Ignoring image field '{field_name}': {declared_size} bytes exceeds {self.max_image_bytes}"
            )
            return None

        try:
            content = upload.read(self.max_image_bytes + 1)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable image field '{field_name}': {e}")
            return None

        if not isinstance(content, (bytes, bytearray)):
            logger.warning(f"Ignoring image field '{field_name}': not binary content")
            return None
        if not content:
            return None
        if len(content) > self.max_image_bytes:
            logger.warning(f"Ignoring image field '{field_name}': larger than {self.max_image_bytes} bytes")
            return None

        filename = os.path.basename(getattr(upload, "name", None) or "")
        content_type = (
            getattr(upload, "content_type", None) or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        )
        return ImagePayload(content=bytes(content), filename=filename, content_type=content_type)
