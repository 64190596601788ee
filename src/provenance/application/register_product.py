"""Application service: Register Product use case.

Creates the Product record and its first provenance step together, then
announces the new product.  Registration is not owner-gated: whoever
registers becomes both manufacturer and first owner.
"""

from __future__ import annotations

from datetime import datetime

from provenance.domain.exceptions import AlreadyExistsError
from provenance.domain.model.events import ProductAdded
from provenance.domain.model.product import Product
from provenance.domain.model.product_step import MANUFACTURED
from provenance.domain.model.value_objects import Principal
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository
from provenance.domain.service.event_publisher import EventPublisher
from provenance.domain.service.provenance_ledger import ProvenanceLedger


class RegisterProductHandler:

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
        name: str,
        company_name: str,
        location: str,
        caller: Principal,
        now: datetime,
    ) -> None:
        """Register a new product.

        Steps:
        1. Reject a malformed ID (non-int, or the reserved ID 0).
        2. Reject an ID that is already taken, reading both stores before
           anything is written.
        3. Persist the Product and append the "Manufactured" step; if the
           append fails, the saved product is discarded again.
        4. Publish ProductAdded.
        """
        product = Product.create(
            product_id=product_id,
            name=name,
            company_name=company_name,
            manufacturer=caller,
            now=now,
        )

        ledger = ProvenanceLedger(self._step_repo)
        if (
            self._product_repo.get_by_id(product.id) is not None
            or ledger.history(product.id)
        ):
            raise AlreadyExistsError(f"Product #{product.id} already exists")

        self._product_repo.save(product)
        try:
            ledger.append(product.id, MANUFACTURED, location, caller, now)
        except Exception:
            self._product_repo.discard(product.id)
            raise

        self._publisher.publish(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                company_name=product.company_name,
                manufacturer=product.manufacturer,
            )
        )
