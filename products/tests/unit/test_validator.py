import json
from decimal import Decimal

import pytest

from products.domain import DraftProduct, DraftValidator, ImagePayload, ValidationError, sizes_from_metadata
from products.domain.validator import parse_price, to_minor_units


@pytest.fixture
def validator():
    return DraftValidator()


def make_draft(**overrides):
    fields = {
        "name": "Dress A",
        "description": "desc",
        "price": "49.90",
        "stock": "3",
        "category": "Vestidos",
    }
    fields.update(overrides)
    return DraftProduct(**fields)


@pytest.mark.unit
class TestPriceConversion:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("49.90", 4990),
            ("49,90", 4990),
            ("10", 1000),
            ("0.01", 1),
            ("19.999", 2000),
            ("0.005", 1),
            (" 7.5 ", 750),
        ],
    )
    def test_minor_units(self, raw, expected):
        assert to_minor_units(parse_price(raw)) == expected

    def test_rounds_half_up(self):
        assert to_minor_units(Decimal("1.005")) == 101


@pytest.mark.unit
class TestDraftValidator:
    def test_normalizes_valid_draft(self, validator):
        draft = make_draft(sizes={"PP": {"busto": "80"}})

        normalized = validator.validate(draft)

        assert normalized.name == "Dress A"
        assert normalized.unit_amount == 4990
        assert normalized.stock == "3"
        assert normalized.category == "Vestidos"
        assert normalized.sizes == {"PP": {"busto": "80"}}

    @pytest.mark.parametrize("field", ["name", "description", "price"])
    def test_missing_required_field(self, validator, field):
        with pytest.raises(ValidationError) as exc:
            validator.validate(make_draft(**{field: None}))

        assert exc.value.field == field
        assert exc.value.status_code == 400
        assert field in exc.value.message

    @pytest.mark.parametrize("field", ["name", "description"])
    def test_blank_text_is_missing(self, validator, field):
        with pytest.raises(ValidationError):
            validator.validate(make_draft(**{field: "   "}))

    @pytest.mark.parametrize(
        "price",
        [
            "0",
            "-5",
            "0.00",
            "0.004",
            "abc",
            "NaN",
            "Infinity",
            "",
            "1.234,56",
            "1000000",
            "1e30",
            "99999999999999999999999999999",
            "1e999999",
        ],
    )
    def test_invalid_price(self, validator, price):
        with pytest.raises(ValidationError) as exc:
            validator.validate(make_draft(price=price))

        assert exc.value.field == "price"

    def test_largest_accepted_price(self, validator):
        assert validator.validate(make_draft(price="999999.99")).unit_amount == 99_999_999

    def test_price_above_limit_names_the_maximum(self, validator):
        with pytest.raises(ValidationError) as exc:
            validator.validate(make_draft(price="999999.995"))

        assert exc.value.status_code == 400
        assert "999999.99" in exc.value.message

    def test_missing_stock_and_category_default(self, validator):
        normalized = validator.validate(make_draft(stock=None, category=None))

        assert normalized.stock == "0"
        assert normalized.category == ""

    def test_stock_is_normalized(self, validator):
        assert validator.validate(make_draft(stock=" 05 ")).stock == "5"

    @pytest.mark.parametrize("stock", ["-1", "2.5", "many"])
    def test_invalid_stock(self, validator, stock):
        with pytest.raises(ValidationError) as exc:
            validator.validate(make_draft(stock=stock))

        assert exc.value.field == "stock"

    def test_image_is_carried_over(self, validator):
        image = ImagePayload(content=b"png", filename="a.png", content_type="image/png")

        assert validator.validate(make_draft(image=image)).image is image

    def test_too_many_sizes(self, validator):
        sizes = {f"S{i}": {"busto": "80"} for i in range(49)}

        with pytest.raises(ValidationError) as exc:
            validator.validate(make_draft(sizes=sizes))

        assert exc.value.field == "sizes"

    def test_measurement_entry_too_long(self, validator):
        sizes = {"PP": {f"medida{i}": "100" for i in range(60)}}

        with pytest.raises(ValidationError) as exc:
            validator.validate(make_draft(sizes=sizes))

        assert exc.value.field == "sizes"


@pytest.mark.unit
class TestMetadata:
    def test_metadata_layout(self, validator):
        normalized = validator.validate(make_draft(sizes={"PP": {"busto": "80"}}))

        assert normalized.metadata() == {
            "stock": "3",
            "category": "Vestidos",
            "size_PP": '{"busto":"80"}',
        }

    def test_sizes_round_trip_through_metadata(self, validator):
        sizes = {"PP": {"busto": "80", "cintura": "62"}, "G": {"busto": "100"}}
        normalized = validator.validate(make_draft(sizes=sizes))

        metadata = normalized.metadata()

        assert json.loads(metadata["size_G"]) == {"busto": "100"}
        assert sizes_from_metadata(metadata) == sizes
