"""Notifications broadcast after a successful state change.

They are fire-and-forget signals for external subscribers and are never
part of an operation's return value.
"""

from __future__ import annotations

from dataclasses import dataclass

from provenance.domain.model.value_objects import Principal


@dataclass(frozen=True)
class ProductAdded:
    product_id: int
    name: str
    company_name: str
    manufacturer: Principal


@dataclass(frozen=True)
class ProductStatusUpdated:
    product_id: int
    status: str
    location: str
    updated_by: Principal


DomainEvent = ProductAdded | ProductStatusUpdated
