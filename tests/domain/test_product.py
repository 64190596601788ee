"""Unit tests for the Product aggregate and its ownership rules."""

from datetime import datetime, timezone

import pytest

from provenance.domain.exceptions import NotOwnerError, ValidationError
from provenance.domain.model.product import Product
from provenance.domain.model.value_objects import Principal

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
MAKER = Principal("acme-factory")
RETAILER = Principal("retailer")


def _make_product(product_id: int = 1) -> Product:
    return Product.create(product_id, "Widget", "Acme", MAKER, T0)


class TestProductCreation:

    def test_happy_path(self):
        product = _make_product()
        assert product.id == 1
        assert product.name == "Widget"
        assert product.company_name == "Acme"
        assert product.created_at == T0

    def test_manufacturer_is_first_owner(self):
        product = _make_product()
        assert product.manufacturer == MAKER
        assert product.current_owner == MAKER

    def test_id_zero_rejected(self):
        with pytest.raises(ValidationError, match="non-zero"):
            _make_product(0)

    def test_non_integer_id_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product.create("1", "Widget", "Acme", MAKER, T0)

    def test_bool_id_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product.create(True, "Widget", "Acme", MAKER, T0)


class TestProductStatusGate:

    def test_owner_may_record_status(self):
        product = _make_product()
        product.record_status_by(MAKER)
        assert product.current_owner == MAKER

    def test_non_owner_rejected(self):
        product = _make_product()
        with pytest.raises(NotOwnerError, match="not the current owner"):
            product.record_status_by(RETAILER)
        assert product.current_owner == MAKER


class TestProductTransfer:

    def test_transfer_changes_owner(self):
        product = _make_product()
        product.transfer_to(RETAILER, caller=MAKER)
        assert product.current_owner == RETAILER
        assert product.manufacturer == MAKER

    def test_transfer_by_non_owner_rejected(self):
        product = _make_product()
        with pytest.raises(NotOwnerError):
            product.transfer_to(RETAILER, caller=RETAILER)
        assert product.current_owner == MAKER

    def test_previous_owner_loses_control(self):
        product = _make_product()
        product.transfer_to(RETAILER, caller=MAKER)
        with pytest.raises(NotOwnerError):
            product.transfer_to(MAKER, caller=MAKER)

    def test_transfer_to_self_accepted(self):
        product = _make_product()
        product.transfer_to(MAKER, caller=MAKER)
        assert product.current_owner == MAKER

    def test_transfer_to_placeholder_principal_accepted(self):
        product = _make_product()
        product.transfer_to(Principal(""), caller=MAKER)
        assert product.current_owner == Principal("")


class TestProductCompany:

    def test_exact_match(self):
        assert _make_product().is_from_company("Acme")

    def test_comparison_is_case_sensitive(self):
        assert not _make_product().is_from_company("acme")

    def test_no_whitespace_normalization(self):
        assert not _make_product().is_from_company("Acme ")
