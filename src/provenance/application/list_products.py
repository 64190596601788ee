"""Application service: List Products use case (query)."""

from __future__ import annotations

from provenance.application.dto import ProductDetailsDTO
from provenance.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDetailsDTO]:
        return [
            ProductDetailsDTO.from_product(product)
            for product in self._product_repo.list_all()
        ]
