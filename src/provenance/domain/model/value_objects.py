"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from provenance.domain.exceptions import ValidationError

# Product ID 0 means "no such product" and can never be registered.
ABSENT_PRODUCT_ID = 0


@dataclass(frozen=True)
class Principal:
    """An authenticated caller identity supplied by the host.

    Opaque to the domain: it is only ever compared for equality. No
    format is enforced, so a blank or placeholder principal is a valid
    value (ownership can be handed to one).
    """

    value: str

    def __str__(self) -> str:
        return self.value


def require_integer_id(product_id: int) -> int:
    """Reject lookups by anything but a plain int.

    ``bool`` is refused too: ``True == 1`` would find product 1 in a dict
    while being stored under a different key as text.
    """
    if isinstance(product_id, bool) or not isinstance(product_id, int):
        raise ValidationError(
            f"Product ID must be an integer, got {type(product_id).__name__}"
        )
    return product_id


def validate_product_id(product_id: int) -> int:
    """Return *product_id* if it can identify a newly registered product."""
    require_integer_id(product_id)
    if product_id == ABSENT_PRODUCT_ID:
        raise ValidationError("Product ID must be non-zero")
    return product_id
