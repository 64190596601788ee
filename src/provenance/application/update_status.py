"""Application service: Update Status use case.

Owner-gated.  Appends a new provenance step recorded by the caller and
announces it.
"""

from __future__ import annotations

from datetime import datetime

from provenance.domain.exceptions import EntityNotFoundError
from provenance.domain.model.events import ProductStatusUpdated
from provenance.domain.model.value_objects import Principal, require_integer_id
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository
from provenance.domain.service.event_publisher import EventPublisher
from provenance.domain.service.provenance_ledger import ProvenanceLedger


class UpdateStatusHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        step_repo: StepRepository,
        publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._step_repo = step_repo
        self._publisher = publisher

    def handle(
        self,
        product_id: int,
        status: str,
        location: str,
        caller: Principal,
        now: datetime,
    ) -> None:
        product = self._product_repo.get_by_id(require_integer_id(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        # Raises NotOwnerError before anything is written
        product.record_status_by(caller)

        # The owner is unchanged, so the save after the append cannot leave
        # a different owner on record if it fails.
        ProvenanceLedger(self._step_repo).append(
            product_id, status, location, caller, now
        )
        self._product_repo.save(product)

        self._publisher.publish(
            ProductStatusUpdated(
                product_id=product_id,
                status=status,
                location=location,
                updated_by=caller,
            )
        )
