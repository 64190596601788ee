"""Provenance registry, the single entry point a host talks to.

Holds one explicitly-owned store (product + step repositories), the
event publisher, and the lock that serializes every operation on them.
Each public method runs one use-case handler under that lock, so:

- a reader never sees a product whose first step has not been appended
- two owner-gated mutations of the same product are strictly ordered

The host supplies ``caller`` and ``now`` to every call; nothing here
reads the clock or guesses who is calling.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime

from provenance.application.authenticate import (
    AuthenticateCompanyProductHandler,
    AuthenticateProductHandler,
)
from provenance.application.dto import ProductDetailsDTO
from provenance.application.list_products import ListProductsHandler
from provenance.application.register_product import RegisterProductHandler
from provenance.application.show_history import (
    ShowHistoryHandler,
    ShowLastStatusHandler,
)
from provenance.application.show_product import ShowProductHandler
from provenance.application.transfer_ownership import TransferOwnershipHandler
from provenance.application.update_status import UpdateStatusHandler
from provenance.domain.exceptions import DomainException
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import Principal
from provenance.domain.repository.product_repository import ProductRepository
from provenance.domain.repository.step_repository import StepRepository
from provenance.domain.service.event_publisher import EventPublisher

logger = logging.getLogger("provenance.registry")


class ProvenanceRegistry:

    def __init__(
        self,
        product_repo: ProductRepository,
        step_repo: StepRepository,
        publisher: EventPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._step_repo = step_repo
        self._publisher = publisher
        self._lock = threading.RLock()

    # --- Commands -------------------------------------------------------------

    def register(
        self,
        product_id: int,
        name: str,
        company_name: str,
        location: str,
        caller: Principal,
        now: datetime,
    ) -> None:
        handler = RegisterProductHandler(
            self._product_repo, self._step_repo, self._publisher
        )
        with self._lock:
            try:
                handler.handle(product_id, name, company_name, location, caller, now)
            except DomainException as exc:
                logger.warning(f"register #{product_id} rejected: {exc}")
                raise
        logger.info(f"Product #{product_id} registered by '{caller}'")

    def update_status(
        self,
        product_id: int,
        status: str,
        location: str,
        caller: Principal,
        now: datetime,
    ) -> None:
        handler = UpdateStatusHandler(
            self._product_repo, self._step_repo, self._publisher
        )
        with self._lock:
            try:
                handler.handle(product_id, status, location, caller, now)
            except DomainException as exc:
                logger.warning(f"update_status #{product_id} rejected: {exc}")
                raise
        logger.info(f"Product #{product_id} status '{status}' recorded by '{caller}'")

    def transfer_ownership(
        self,
        product_id: int,
        new_owner: Principal,
        caller: Principal,
    ) -> None:
        handler = TransferOwnershipHandler(self._product_repo)
        with self._lock:
            try:
                handler.handle(product_id, new_owner, caller)
            except DomainException as exc:
                logger.warning(f"transfer_ownership #{product_id} rejected: {exc}")
                raise
        logger.info(
            f"Product #{product_id} transferred from '{caller}' to '{new_owner}'"
        )

    # --- Queries --------------------------------------------------------------

    def get_product_details(self, product_id: int) -> ProductDetailsDTO:
        with self._lock:
            return ShowProductHandler(self._product_repo).handle(product_id)

    def list_products(self) -> list[ProductDetailsDTO]:
        with self._lock:
            return ListProductsHandler(self._product_repo).handle()

    def get_product_history(self, product_id: int) -> list[ProductStep]:
        with self._lock:
            return ShowHistoryHandler(self._step_repo).handle(product_id)

    def get_last_product_status(self, product_id: int) -> ProductStep:
        with self._lock:
            return ShowLastStatusHandler(
                self._product_repo, self._step_repo
            ).handle(product_id)

    def authenticate_product(self, product_id: int) -> list[ProductStep]:
        with self._lock:
            return AuthenticateProductHandler(self._step_repo).handle(product_id)

    def authenticate_company_product(
        self, product_id: int, company_name: str
    ) -> bool:
        with self._lock:
            return AuthenticateCompanyProductHandler(self._product_repo).handle(
                product_id, company_name
            )
