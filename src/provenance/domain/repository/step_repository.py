"""Abstract repository for provenance history.

Append-only: there is deliberately no way to replace or remove a step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from provenance.domain.model.product_step import ProductStep


class StepRepository(ABC):

    @abstractmethod
    def append(self, product_id: int, step: ProductStep) -> None:
        """Add *step* to the end of the product's history."""

    @abstractmethod
    def list_for(self, product_id: int) -> list[ProductStep]:
        """Return the product's steps in insertion order ([] if unknown)."""

    @abstractmethod
    def last_for(self, product_id: int) -> ProductStep | None:
        """Return the most recently appended step, or None."""
