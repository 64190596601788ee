"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from provenance.application.registry import ProvenanceRegistry
from provenance.infrastructure.events.subscriber_publisher import (
    SubscriberPublisher,
)
from provenance.infrastructure.persistence.in_memory_repositories import (
    InMemoryProductRepository,
    InMemoryStepRepository,
)
from provenance.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from provenance.infrastructure.persistence.json_step_repository import (
    JsonStepRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def json_registry(
    data_dir: Path = DEFAULT_DATA_DIR,
    publisher: SubscriberPublisher | None = None,
) -> ProvenanceRegistry:
    """Registry persisted as ``products.json`` and ``history.json``."""
    return ProvenanceRegistry(
        product_repo=JsonProductRepository(data_dir / "products.json"),
        step_repo=JsonStepRepository(data_dir / "history.json"),
        publisher=publisher or SubscriberPublisher(),
    )


def in_memory_registry(
    publisher: SubscriberPublisher | None = None,
) -> ProvenanceRegistry:
    """Registry that lives only as long as the hosting process."""
    return ProvenanceRegistry(
        product_repo=InMemoryProductRepository(),
        step_repo=InMemoryStepRepository(),
        publisher=publisher or SubscriberPublisher(),
    )
