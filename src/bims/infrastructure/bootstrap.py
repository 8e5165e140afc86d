"""Composition root — wires a concrete repository to the engine.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from bims.application.engine import InventoryEngine
from bims.domain.exceptions import StorageError
from bims.domain.repository.inventory_repository import InventoryRepository
from bims.infrastructure.persistence.memory_inventory_repository import (
    InMemoryInventoryRepository,
)
from bims.infrastructure.persistence.sql_inventory_repository import (
    SqlInventoryRepository,
)
from bims.infrastructure.persistence.text_inventory_repository import (
    TextFileInventoryRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

BACKENDS = ("memory", "file", "sql")
DEFAULT_BACKEND = "file"

_DEFAULT_FILES = {
    "file": "inventory.txt",
    "sql": "inventory.db",
}


def default_data_path(backend: str) -> Path | None:
    name = _DEFAULT_FILES.get(backend)
    return None if name is None else _DATA_DIR / name


def inventory_repository(
    backend: str = DEFAULT_BACKEND, data_path: Path | None = None
) -> InventoryRepository:
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}; expected one of {BACKENDS}")
    if backend == "memory":
        return InMemoryInventoryRepository()

    path = data_path or default_data_path(backend)
    if backend == "file":
        return TextFileInventoryRepository(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"Cannot create data directory '{path.parent}': {exc}") from exc
    return SqlInventoryRepository(f"sqlite:///{path}")


@dataclass
class Settings:
    """Runtime configuration collected by the CLI."""

    backend: str = DEFAULT_BACKEND
    data_path: Path | None = None
    _engine: InventoryEngine | None = field(default=None, repr=False)

    def engine(self) -> InventoryEngine:
        """Build the engine on first use and reuse it afterwards."""
        if self._engine is None:
            self._engine = InventoryEngine(inventory_repository(self.backend, self.data_path))
        return self._engine
