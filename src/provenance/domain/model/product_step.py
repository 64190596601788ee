"""ProductStep: one immutable entry in a product's provenance history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from provenance.domain.model.value_objects import Principal

# Status label of the step recorded at registration time.
MANUFACTURED = "Manufactured"


@dataclass(frozen=True)
class ProductStep:
    """A status/location event recorded by a stakeholder.

    ``status`` and ``location`` are free-form labels (e.g. "Shipped",
    "Port-X").  ``stakeholder`` is whoever owned the product when the step
    was recorded.
    """

    status: str
    location: str
    stakeholder: Principal
    recorded_at: datetime
