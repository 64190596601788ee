"""Domain service: Provenance Ledger.

Owns the append-only history of every product.  ``append`` performs no
authorization of its own: it is only called by the registration and
status-update use cases, after they have checked the caller.
"""

from __future__ import annotations

from datetime import datetime

from provenance.domain.exceptions import NoHistoryError
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import Principal
from provenance.domain.repository.step_repository import StepRepository


class ProvenanceLedger:

    def __init__(self, step_repo: StepRepository) -> None:
        self._step_repo = step_repo

    def append(
        self,
        product_id: int,
        status: str,
        location: str,
        stakeholder: Principal,
        now: datetime,
    ) -> ProductStep:
        step = ProductStep(
            status=status,
            location=location,
            stakeholder=stakeholder,
            recorded_at=now,
        )
        self._step_repo.append(product_id, step)
        return step

    def history(self, product_id: int) -> list[ProductStep]:
        """Full history in insertion order; empty for an unknown product."""
        return list(self._step_repo.list_for(product_id))

    def last_step(self, product_id: int) -> ProductStep:
        step = self._step_repo.last_for(product_id)
        if step is None:
            raise NoHistoryError(f"Product #{product_id} has no recorded history")
        return step
