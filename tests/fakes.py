"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from provenance.domain.exceptions import StorageError
from provenance.domain.model.events import DomainEvent
from provenance.domain.model.product import Product
from provenance.domain.model.product_step import ProductStep
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository
from provenance.domain.service.event_publisher import EventPublisher


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def discard(self, product_id: int) -> None:
        self._store.pop(product_id, None)


class FakeStepRepository(StepRepository):

    def __init__(self) -> None:
        self._store: dict[int, list[ProductStep]] = {}

    def append(self, product_id: int, step: ProductStep) -> None:
        self._store.setdefault(product_id, []).append(step)

    def list_for(self, product_id: int) -> list[ProductStep]:
        return list(self._store.get(product_id, []))

    def last_for(self, product_id: int) -> ProductStep | None:
        steps = self._store.get(product_id)
        return steps[-1] if steps else None


class RecordingPublisher(EventPublisher):

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)


class FailingStepRepository(FakeStepRepository):
    """Step store whose appends fail, as a full or read-only disk would."""

    def append(self, product_id: int, step: ProductStep) -> None:
        raise StorageError("history store is read-only")
