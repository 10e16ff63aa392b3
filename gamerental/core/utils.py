"""
Utility functions for the application.
"""
from typing import Any
from decimal import Decimal, ROUND_HALF_UP
from pydantic import TypeAdapter, ValidationError
from gamerental.core.errors import InvalidField

CENTS = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    """Quantize a decimal amount to two fractional digits."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    """Format a decimal amount for display."""
    return f"${to_money(amount):,.2f}"


def validate_field(field: str, annotation: Any, value: Any) -> Any:
    """
    Validate a single field value against an annotated type.
    Raises InvalidField with the first validation message on failure. When
    validating a model, the failing attribute name is reported instead.
    """
    try:
        return TypeAdapter(annotation).validate_python(value)
    except ValidationError as exc:
        error = exc.errors()[0]
        loc = error.get("loc") or ()
        name = str(loc[-1]) if loc else field
        raise InvalidField(name, error.get("msg", "invalid value")) from exc
