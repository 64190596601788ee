"""Dict-backed repositories for hosts that keep the registry in-process.

Products are copied on the way in and out so that no caller can mutate
stored state except through a ``save``.
"""

from __future__ import annotations

from dataclasses import replace

from provenance.domain.model.product import Product
from provenance.domain.model.product_step import ProductStep
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store.values()]

    def save(self, product: Product) -> None:
        self._store[product.id] = replace(product)

    def discard(self, product_id: int) -> None:
        self._store.pop(product_id, None)


class InMemoryStepRepository(StepRepository):

    def __init__(self) -> None:
        self._store: dict[int, list[ProductStep]] = {}

    def append(self, product_id: int, step: ProductStep) -> None:
        self._store.setdefault(product_id, []).append(step)

    def list_for(self, product_id: int) -> list[ProductStep]:
        return list(self._store.get(product_id, []))

    def last_for(self, product_id: int) -> ProductStep | None:
        steps = self._store.get(product_id)
        return steps[-1] if steps else None
