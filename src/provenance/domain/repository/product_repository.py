"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from provenance.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every registered product, in registration order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def discard(self, product_id: int) -> None:
        """Undo the save of a product whose registration did not complete.

        Only used to roll back a failed registration; registered products
        are never deleted.
        """
