"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from provenance.domain.exceptions import StorageError
from provenance.domain.model.product import Product
from provenance.domain.model.value_objects import Principal
from provenance.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def discard(self, product_id: int) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                item["id"]: Product(
                    id=item["id"],
                    name=item["name"],
                    company_name=item["company_name"],
                    manufacturer=Principal(item["manufacturer"]),
                    current_owner=Principal(item["current_owner"]),
                    created_at=datetime.fromisoformat(item["created_at"]),
                )
                for item in raw
            }
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise StorageError(
                f"Cannot read products from {self._file_path}: {exc}"
            ) from exc

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "company_name": p.company_name,
                "manufacturer": p.manufacturer.value,
                "current_owner": p.current_owner.value,
                "created_at": p.created_at.isoformat(),
            }
            for p in products.values()
        ]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(
                f"Cannot write products to {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
