"""Application service: Load Inventory use case.

Reads catalog lines of the form ``id,description,quantity,price,status``.
A bad line is skipped with a warning naming its line number; it never
stops the rest of the batch. Commas inside a field are not escaped, so a
description containing one shows up as a wrong field count.

The status column is stored as written, even when it disagrees with the
quantity. The next quantity update reconciles it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from bims.application.dto import LoadSummary, LoadWarning, Outcome
from bims.domain.exceptions import DomainException, EntityNotFoundError, ValidationError
from bims.domain.model.item import InventoryItem
from bims.domain.model.validators import (
    validate_description,
    validate_id,
    validate_price,
    validate_quantity,
    validate_status,
)
from bims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 5


class LoadInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, lines: Iterable[str]) -> Outcome[LoadSummary]:
        """Insert every well-formed line that is not a duplicate."""
        warnings: list[LoadWarning] = []
        seen: set[str] = set()
        loaded = 0

        for line_number, raw_line in enumerate(list(lines), start=1):
            line = raw_line.strip()
            if not line:
                continue
            try:
                item = self._parse(line, seen)
                if not self._inventory_repo.insert(item):
                    raise ValidationError(f"Duplicate ID '{item.id}'", field="id")
            except DomainException as exc:
                warning = LoadWarning(line_number, f"{exc}. Skipping line '{line}'")
                logger.warning("%s", warning)
                warnings.append(warning)
                continue
            seen.add(item.id.lower())
            loaded += 1

        summary = LoadSummary(loaded=loaded, warnings=warnings)
        if loaded:
            message = f"Successfully loaded {loaded} item(s)"
        else:
            message = "No valid items found to load"
        if warnings:
            message += f" ({len(warnings)} line(s) skipped)"
        logger.info("%s", message)
        return Outcome.success(message, summary)

    def handle_file(self, file_path: str | Path | None) -> Outcome[LoadSummary]:
        """Read the whole file, then load it line by line.

        Only a blank path, a missing file or an unreadable file fails the
        call as a whole; nothing is inserted in that case.
        """
        try:
            lines = self._read(file_path)
        except DomainException as exc:
            logger.debug("Cannot load %r: %s", file_path, exc)
            return Outcome.from_exception(exc)
        return self.handle(lines)

    # --- Parsing ---------------------------------------------------------------

    def _parse(self, line: str, seen: set[str]) -> InventoryItem:
        parts = [part.strip() for part in line.split(DELIMITER)]
        if len(parts) != FIELD_COUNT:
            raise ValidationError(
                f"Expected {FIELD_COUNT} comma-separated values, got {len(parts)}"
            )
        id_text, description, quantity, price, status = parts

        checked_id = validate_id(id_text)
        if not checked_id.ok:
            raise ValidationError(f"Invalid ID '{id_text}'", field="id")
        item_id = checked_id.unwrap()
        if item_id.lower() in seen or self._inventory_repo.exists(item_id):
            raise ValidationError(f"Duplicate ID '{item_id}'", field="id")

        return InventoryItem(
            id=item_id,
            description=validate_description(description).unwrap(),
            quantity=validate_quantity(quantity).unwrap(),
            price=validate_price(price).unwrap(),
            status=validate_status(status).unwrap(),
        )

    @staticmethod
    def _read(file_path: str | Path | None) -> list[str]:
        if file_path is None or not str(file_path).strip():
            raise ValidationError("File path cannot be blank", field="path")
        path = Path(str(file_path).strip())
        if not path.is_file():
            raise EntityNotFoundError(f"File not found at '{path}'")
        try:
            return path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise ValidationError(f"Error reading file '{path}': {exc}", field="path") from exc
