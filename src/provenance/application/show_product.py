"""Application service: Show Product use case (query)."""

from __future__ import annotations

from provenance.application.dto import ProductDetailsDTO
from provenance.domain.exceptions import EntityNotFoundError
from provenance.domain.model.value_objects import require_integer_id
from provenance.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDetailsDTO:
        product = self._product_repo.get_by_id(require_integer_id(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return ProductDetailsDTO.from_product(product)
