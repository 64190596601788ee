"""Integration tests for the authentication and history queries."""

from datetime import datetime, timedelta, timezone

import pytest

from provenance.application.authenticate import (
    AuthenticateCompanyProductHandler,
    AuthenticateProductHandler,
)
from provenance.application.register_product import RegisterProductHandler
from provenance.application.show_history import (
    ShowHistoryHandler,
    ShowLastStatusHandler,
)
from provenance.application.show_product import ShowProductHandler
from provenance.application.update_status import UpdateStatusHandler
from provenance.domain.exceptions import EntityNotFoundError, NoHistoryError
from provenance.domain.model.product import Product
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import Principal
from tests.fakes import FakeProductRepository, FakeStepRepository, RecordingPublisher

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
T1 = T0 + timedelta(days=1)
MAKER = Principal("acme-factory")


def _setup():
    product_repo = FakeProductRepository()
    step_repo = FakeStepRepository()
    publisher = RecordingPublisher()
    RegisterProductHandler(product_repo, step_repo, publisher).handle(
        1, "Widget", "Acme", "Factory-A", MAKER, T0
    )
    UpdateStatusHandler(product_repo, step_repo, publisher).handle(
        1, "Shipped", "Port-X", MAKER, T1
    )
    return product_repo, step_repo


class TestAuthenticateCompanyProduct:

    def test_matching_company(self):
        product_repo, _ = _setup()
        handler = AuthenticateCompanyProductHandler(product_repo)
        assert handler.handle(1, "Acme") is True

    def test_different_company(self):
        product_repo, _ = _setup()
        handler = AuthenticateCompanyProductHandler(product_repo)
        assert handler.handle(1, "Globex") is False

    def test_case_differs(self):
        product_repo, _ = _setup()
        handler = AuthenticateCompanyProductHandler(product_repo)
        assert handler.handle(1, "ACME") is False

    def test_unknown_product_is_an_error_not_false(self):
        product_repo, _ = _setup()
        handler = AuthenticateCompanyProductHandler(product_repo)
        with pytest.raises(EntityNotFoundError):
            handler.handle(999, "Acme")


class TestAuthenticateProduct:

    def test_same_data_as_history(self):
        _, step_repo = _setup()
        assert (
            AuthenticateProductHandler(step_repo).handle(1)
            == ShowHistoryHandler(step_repo).handle(1)
        )

    def test_full_chain_returned(self):
        _, step_repo = _setup()
        steps = AuthenticateProductHandler(step_repo).handle(1)
        assert [s.status for s in steps] == ["Manufactured", "Shipped"]

    def test_unknown_product_empty(self):
        _, step_repo = _setup()
        assert AuthenticateProductHandler(step_repo).handle(999) == []


class TestShowQueries:

    def test_show_unknown_product_rejected(self):
        product_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowProductHandler(product_repo).handle(999)

    def test_last_status(self):
        product_repo, step_repo = _setup()
        step = ShowLastStatusHandler(product_repo, step_repo).handle(1)
        assert step == ProductStep("Shipped", "Port-X", MAKER, T1)

    def test_last_status_unknown_product_rejected(self):
        product_repo, step_repo = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowLastStatusHandler(product_repo, step_repo).handle(999)

    def test_last_status_known_product_without_steps_rejected(self):
        # Only reachable if the store was populated behind the registry's back
        product_repo = FakeProductRepository(
            [Product.create(5, "Orphan", "Acme", MAKER, T0)]
        )
        step_repo = FakeStepRepository()
        with pytest.raises(NoHistoryError):
            ShowLastStatusHandler(product_repo, step_repo).handle(5)
