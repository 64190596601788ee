"""Application service: Authentication queries.

Read-only checks layered over the registry and ledger; they keep no
state of their own.
"""

from __future__ import annotations

from provenance.domain.exceptions import EntityNotFoundError
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import require_integer_id
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository
from provenance.domain.service.provenance_ledger import ProvenanceLedger


class AuthenticateProductHandler:
    """Return the full chain of custody for manual inspection.

    Same data as the operational history query.
    """

    def __init__(self, step_repo: StepRepository) -> None:
        self._step_repo = step_repo

    def handle(self, product_id: int) -> list[ProductStep]:
        require_integer_id(product_id)
        return ProvenanceLedger(self._step_repo).history(product_id)


class AuthenticateCompanyProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, claimed_company_name: str) -> bool:
        """True iff the product was registered under *claimed_company_name*.

        An unknown product is an error, never a silent ``False``.
        """
        product = self._product_repo.get_by_id(require_integer_id(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product.is_from_company(claimed_company_name)
