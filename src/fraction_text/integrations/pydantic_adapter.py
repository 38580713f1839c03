"""
Pydantic integration: parse fraction text fields into floats.

Example:
    >>> @fraction_fields_parser("quantity", "length")
    ... class Ingredient(BaseModel):
    ...     name: str
    ...     quantity: Optional[float] = None
    ...     length: Optional[float] = None
    >>> Ingredient(name="flour", quantity="1 1/2").quantity
    1.5
"""

from typing import Any, Optional

from pydantic import ValidationInfo, create_model, field_validator

from fraction_text.codec import FractionFormatter
from fraction_text.utils.logging import get_logger

logger = get_logger(__name__)


def fraction_fields_parser(
    *field_names: str, formatter: Optional[FractionFormatter] = None
) -> Any:
    """
    Class decorator adding a ``mode="before"`` validator for fraction fields.

    ``None`` stays ``None``, numbers pass through, text is parsed with
    ``formatter`` (a settings-configured formatter when omitted). Text that
    does not parse raises ``ValueError``, which pydantic reports as a
    ``ValidationError``.

    The decorated model is replaced by a subclass of the same name carrying
    the validator, since pydantic collects validators at class creation.

    Args:
        field_names: Names of the fields to parse
        formatter: Formatter used for parsing
    """
    if not field_names:
        raise ValueError("fraction_fields_parser needs at least one field name")

    def decorator(cls: Any) -> Any:
        unknown = [name for name in field_names if name not in cls.model_fields]
        if unknown:
            raise ValueError(f"{cls.__name__} has no fields named {unknown}")

        parser = formatter if formatter is not None else FractionFormatter.from_settings()

        def validator_func(cls_: Any, v: Any, info: ValidationInfo) -> Any:
            if v is None or not isinstance(v, str):
                return v

            parsed = parser.parse_to_number(v)
            if parsed is None:
                logger.debug(
                    "pydantic.fraction_field_invalid", field=info.field_name, value=v
                )
                raise ValueError(f"{info.field_name}: cannot parse fraction text {v!r}")
            return parsed

        validator = field_validator(*field_names, mode="before", check_fields=False)(
            classmethod(validator_func)
        )
        model = create_model(
            cls.__name__,
            __base__=cls,
            __module__=cls.__module__,
            __validators__={"parse_fraction_fields": validator},
        )
        model.__qualname__ = cls.__qualname__
        model.__doc__ = cls.__doc__
        return model

    return decorator


__all__ = ["fraction_fields_parser"]
