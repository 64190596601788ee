"""Tests for the in-memory repositories."""

from datetime import datetime, timezone

from provenance.domain.model.product import Product
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import Principal
from provenance.infrastructure.persistence.in_memory_repositories import (
    InMemoryProductRepository,
    InMemoryStepRepository,
)

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
MAKER = Principal("acme-factory")
RETAILER = Principal("retailer")


class TestInMemoryProductRepository:

    def test_unsaved_changes_not_visible(self):
        repo = InMemoryProductRepository()
        product = Product.create(1, "Widget", "Acme", MAKER, T0)
        repo.save(product)

        product.transfer_to(RETAILER, caller=MAKER)

        assert repo.get_by_id(1).current_owner == MAKER

    def test_loaded_copy_is_detached(self):
        repo = InMemoryProductRepository()
        repo.save(Product.create(1, "Widget", "Acme", MAKER, T0))

        loaded = repo.get_by_id(1)
        loaded.transfer_to(RETAILER, caller=MAKER)

        assert repo.get_by_id(1).current_owner == MAKER

    def test_list_all_in_registration_order(self):
        repo = InMemoryProductRepository()
        repo.save(Product.create(2, "Gadget", "Acme", MAKER, T0))
        repo.save(Product.create(1, "Widget", "Acme", MAKER, T0))
        assert [p.id for p in repo.list_all()] == [2, 1]


class TestInMemoryStepRepository:

    def test_append_and_last(self):
        repo = InMemoryStepRepository()
        repo.append(1, ProductStep("Manufactured", "Factory-A", MAKER, T0))
        repo.append(1, ProductStep("Shipped", "Port-X", MAKER, T0))
        assert repo.last_for(1).status == "Shipped"
        assert len(repo.list_for(1)) == 2

    def test_unknown_product(self):
        repo = InMemoryStepRepository()
        assert repo.list_for(1) == []
        assert repo.last_for(1) is None
