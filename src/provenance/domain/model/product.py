"""Product aggregate.

A product is registered exactly once by its manufacturer. Its descriptive
fields never change afterwards; the only mutable state is who currently
owns it, and only that owner may move it forward.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from provenance.domain.exceptions import NotOwnerError
from provenance.domain.model.value_objects import Principal, validate_product_id


@dataclass
class Product:
    """Aggregate root for a registered product.

    Use the ``Product.create()`` factory for new products; it assigns the
    manufacturer as the first owner.  The ``__init__`` is intentionally
    simple so the repository can reconstitute persisted products without
    re-validating.

    Invariants:
    - ``id``, ``name``, ``company_name``, ``manufacturer`` and
      ``created_at`` never change after creation
    - ``current_owner`` changes only through ``transfer_to()`` or the
      idempotent re-assignment in ``record_status_by()``
    """

    id: int
    name: str
    company_name: str
    manufacturer: Principal
    current_owner: Principal
    created_at: datetime

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: int,
        name: str,
        company_name: str,
        manufacturer: Principal,
        now: datetime,
    ) -> Product:
        return Product(
            id=validate_product_id(product_id),
            name=name,
            company_name=company_name,
            manufacturer=manufacturer,
            current_owner=manufacturer,
            created_at=now,
        )

    # --- Ownership gate -------------------------------------------------------

    def is_owned_by(self, principal: Principal) -> bool:
        return self.current_owner == principal

    def assert_owned_by(self, caller: Principal) -> None:
        """Raise NotOwnerError unless *caller* currently owns this product."""
        if not self.is_owned_by(caller):
            raise NotOwnerError(
                f"'{caller}' is not the current owner of product #{self.id}"
            )

    # --- State transitions ----------------------------------------------------

    def record_status_by(self, caller: Principal) -> None:
        """Gate a status update.

        The caller must already be the owner, so the re-assignment below
        never changes who owns the product.
        """
        self.assert_owned_by(caller)
        self.current_owner = caller

    def transfer_to(self, new_owner: Principal, caller: Principal) -> None:
        """Hand ownership to *new_owner*.

        *new_owner* is not validated: transferring to the same owner or to
        a placeholder principal is accepted. No provenance step is recorded
        for the transfer itself.
        """
        self.assert_owned_by(caller)
        self.current_owner = new_owner

    # --- Queries --------------------------------------------------------------

    def is_from_company(self, claimed_company_name: str) -> bool:
        """Exact, case-sensitive comparison, no normalization."""
        return self.company_name == claimed_company_name
