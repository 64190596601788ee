"""Data Transfer Objects: plain containers that cross layer boundaries.

Products are mutable aggregates, so callers outside the domain only ever
receive a frozen snapshot of one.  Provenance steps are already immutable
and are handed out as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from provenance.domain.model.product import Product
from provenance.domain.model.value_objects import Principal


@dataclass(frozen=True)
class ProductDetailsDTO:
    """Output: a registered product as displayed to the user."""

    id: int
    name: str
    company_name: str
    manufacturer: Principal
    current_owner: Principal
    created_at: datetime

    @staticmethod
    def from_product(product: Product) -> ProductDetailsDTO:
        return ProductDetailsDTO(
            id=product.id,
            name=product.name,
            company_name=product.company_name,
            manufacturer=product.manufacturer,
            current_owner=product.current_owner,
            created_at=product.created_at,
        )
