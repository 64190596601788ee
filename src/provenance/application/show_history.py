"""Application service: Show History use cases (queries).

``ShowHistoryHandler`` never fails: an unknown product simply has an
empty history.  ``ShowLastStatusHandler`` distinguishes an unknown
product (EntityNotFoundError) from a known one without steps
(NoHistoryError), although registration always records a first step.
"""

from __future__ import annotations

from provenance.domain.exceptions import EntityNotFoundError
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import require_integer_id
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository
from provenance.domain.service.provenance_ledger import ProvenanceLedger


class ShowHistoryHandler:

    def __init__(self, step_repo: StepRepository) -> None:
        self._step_repo = step_repo

    def handle(self, product_id: int) -> list[ProductStep]:
        require_integer_id(product_id)
        return ProvenanceLedger(self._step_repo).history(product_id)


class ShowLastStatusHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        step_repo: StepRepository,
    ) -> None:
        self._product_repo = product_repo
        self._step_repo = step_repo

    def handle(self, product_id: int) -> ProductStep:
        if self._product_repo.get_by_id(require_integer_id(product_id)) is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return ProvenanceLedger(self._step_repo).last_step(product_id)
