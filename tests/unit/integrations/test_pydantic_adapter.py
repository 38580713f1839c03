"""Tests for the pydantic fraction field decorator."""

from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from fraction_text.codec import FractionFormatter
from fraction_text.integrations import fraction_fields_parser


@fraction_fields_parser("quantity", "weight")
class Ingredient(BaseModel):
    """Recipe line."""

    name: str
    quantity: Optional[float] = None
    weight: Optional[float] = None


@pytest.mark.unit
class TestFractionFieldsParser:
    def test_fraction_text_parsed(self):
        ingredient = Ingredient(name="flour", quantity="1 1/2", weight="¾")

        assert ingredient.quantity == 1.5
        assert ingredient.weight == 0.75

    def test_none_and_numbers_pass_through(self):
        ingredient = Ingredient(name="salt", quantity=None, weight=2)

        assert ingredient.quantity is None
        assert ingredient.weight == 2.0

    def test_unparseable_text_is_a_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Ingredient(name="sugar", quantity="a pinch")
        assert "quantity" in str(exc_info.value)

    def test_other_fields_untouched(self):
        assert Ingredient(name="1/2").name == "1/2"

    def test_decorated_model_keeps_identity(self):
        assert Ingredient.__name__ == "Ingredient"
        assert Ingredient.__doc__ == "Recipe line."

    def test_custom_formatter(self):
        @fraction_fields_parser("amount", formatter=FractionFormatter(parsing_locale="de_DE"))
        class Measurement(BaseModel):
            amount: float

        assert Measurement(amount="1,5").amount == 1.5

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):

            @fraction_fields_parser("missing")
            class Broken(BaseModel):
                amount: float

    def test_field_names_required(self):
        with pytest.raises(ValueError):
            fraction_fields_parser()
