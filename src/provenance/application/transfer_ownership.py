"""Application service: Transfer Ownership use case.

Owner-gated.  Only moves the owner pointer: a transfer is not itself a
provenance event, so no history step is appended and nothing is
published.
"""

from __future__ import annotations

from provenance.domain.exceptions import EntityNotFoundError
from provenance.domain.model.value_objects import Principal, require_integer_id
from provenance.domain.repository.product_repository import ProductRepository


class TransferOwnershipHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, new_owner: Principal, caller: Principal) -> None:
        product = self._product_repo.get_by_id(require_integer_id(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        product.transfer_to(new_owner, caller)
        self._product_repo.save(product)
