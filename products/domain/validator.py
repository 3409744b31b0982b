"""
Draft validation and normalization.

Required-field policy is loose: only name, description and price are
required. A missing stock becomes "0" and a missing category becomes "".
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation
from typing import Optional

from .draft import SIZE_METADATA_PREFIX, DraftProduct, NormalizedDraft
from .exceptions import ValidationError


MINOR_UNITS = Decimal("100")

# Largest unit_amount Stripe accepts for a price
MAX_UNIT_AMOUNT = 99_999_999

# Stripe metadata limits
METADATA_MAX_KEYS = 50
METADATA_KEY_MAX_LENGTH = 40
METADATA_VALUE_MAX_LENGTH = 500


def to_minor_units(price: Decimal) -> int:
    """Convert a decimal price to minor currency units, rounding half up."""
    return int((price * MINOR_UNITS).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_price(raw: Optional[str]) -> Decimal:
    """
    Parse a submitted price.

    Accepts "49.90" and "49,90". Raises ValidationError for a missing,
    non-numeric, non-finite or non-positive value.
    """
    if raw is None or not raw.strip():
        raise ValidationError("Missing required field: price", field="price")

    try:
        price = Decimal(raw.strip().replace(",", "."))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid price: {raw!r}", field="price") from e

    if not price.is_finite() or price <= 0:
        raise ValidationError(f"Invalid price: {raw!r}", field="price")
    return price


class DraftValidator:
    """Validate a DraftProduct and produce a NormalizedDraft."""

    def validate(self, draft: DraftProduct) -> NormalizedDraft:
        """
        Raises:
            ValidationError: On the first failing check
        """
        name = self._required_text(draft.name, "name")
        description = self._required_text(draft.description, "description")

        price = parse_price(draft.price)
        try:
            unit_amount = to_minor_units(price)
        except DecimalException as e:
            raise ValidationError(f"Invalid price: {draft.price!r}", field="price") from e
        if unit_amount <= 0:
            raise ValidationError(f"Invalid price: {draft.price!r}", field="price")
        if unit_amount > MAX_UNIT_AMOUNT:
            raise ValidationError(
                f"Price too large: at most {Decimal(MAX_UNIT_AMOUNT) / MINOR_UNITS} is allowed", field="price"
            )

        normalized = NormalizedDraft(
            name=name,
            description=description,
            unit_amount=unit_amount,
            stock=self._stock(draft.stock),
            category=(draft.category or "").strip(),
            image=draft.image,
            sizes={
                str(size): {str(measure): str(value) for measure, value in measurements.items()}
                for size, measurements in draft.sizes.items()
            },
        )
        self._check_metadata_limits(normalized)
        return normalized

    def _required_text(self, value: Optional[str], field: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValidationError(f"Missing required field: {field}", field=field)
        return value

    def _stock(self, raw: Optional[str]) -> str:
        if raw is None or not raw.strip():
            return "0"
        try:
            stock = int(raw.strip())
        except ValueError as e:
            raise ValidationError(f"Invalid stock: {raw!r}", field="stock") from e
        if stock < 0:
            raise ValidationError(f"Invalid stock: {raw!r}", field="stock")
        return str(stock)

    def _check_metadata_limits(self, draft: NormalizedDraft):
        metadata = draft.metadata()
        if len(metadata) > METADATA_MAX_KEYS:
            raise ValidationError(f"Too many sizes: at most {METADATA_MAX_KEYS - 2} are allowed", field="sizes")

        for key, value in metadata.items():
            field = "sizes" if key.startswith(SIZE_METADATA_PREFIX) else key
            if len(key) > METADATA_KEY_MAX_LENGTH:
                raise ValidationError(f"Metadata key too long: {key!r}", field=field)
            if len(value) > METADATA_VALUE_MAX_LENGTH:
                raise ValidationError(
                    f"Value for {key!r} exceeds {METADATA_VALUE_MAX_LENGTH} characters", field=field
                )
