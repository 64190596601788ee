"""JSON-file-backed implementation of StepRepository.

The file holds one object mapping product ID to its list of steps.  JSON
object keys are strings, so IDs are stringified on the way out and
parsed back on the way in.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from provenance.domain.exceptions import StorageError
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import Principal
from provenance.domain.repository.step_repository import StepRepository


class JsonStepRepository(StepRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- StepRepository interface ---------------------------------------------

    def append(self, product_id: int, step: ProductStep) -> None:
        records = self._load_raw()
        records.setdefault(str(product_id), []).append(self._to_raw(step))
        self._persist_raw(records)

    def list_for(self, product_id: int) -> list[ProductStep]:
        raw_steps = self._load_raw().get(str(product_id), [])
        return [self._to_domain(raw) for raw in raw_steps]

    def last_for(self, product_id: int) -> ProductStep | None:
        raw_steps = self._load_raw().get(str(product_id), [])
        if not raw_steps:
            return None
        return self._to_domain(raw_steps[-1])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(step: ProductStep) -> dict:
        return {
            "status": step.status,
            "location": step.location,
            "stakeholder": step.stakeholder.value,
            "recorded_at": step.recorded_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductStep:
        return ProductStep(
            status=raw["status"],
            location=raw["location"],
            stakeholder=Principal(raw["stakeholder"]),
            recorded_at=datetime.fromisoformat(raw["recorded_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, list[dict]]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(
                f"Cannot read history from {self._file_path}: {exc}"
            ) from exc
        if not isinstance(records, dict):
            raise StorageError(
                f"Cannot read history from {self._file_path}: expected an object"
            )
        return records

    def _persist_raw(self, records: dict[str, list[dict]]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(
                f"Cannot write history to {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
