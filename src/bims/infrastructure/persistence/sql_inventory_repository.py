"""Relational implementation of InventoryRepository (SQLAlchemy).

Maps items onto the ``bracelets`` table. The table is created on first
use. ``id_key`` holds the case-folded id that lookups match against,
since SQLite's ``lower()`` only folds ASCII letters.
Storage order is SQLite insertion order (``rowid``).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Column, Float, Integer, String, create_engine, literal_column
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from bims.domain.exceptions import StorageError
from bims.domain.model.item import InventoryItem, StockStatus
from bims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

Base = declarative_base()


class BraceletRow(Base):
    __tablename__ = "bracelets"

    id = Column(String, primary_key=True)
    id_key = Column(String, nullable=False, unique=True, index=True)
    description = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    status = Column(String, nullable=False)


class SqlInventoryRepository(InventoryRepository):

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._database_url = database_url
        try:
            self._engine = create_engine(database_url, echo=echo)
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            logger.error("Cannot open database %s: %s", database_url, exc)
            raise StorageError(f"Cannot open database '{database_url}': {exc}") from exc
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            session.rollback()
            logger.error("Database error on %s: %s", self._database_url, exc)
            raise StorageError(f"Database error: {exc}") from exc
        finally:
            session.close()

    # --- InventoryRepository interface ----------------------------------------

    def list_all(self) -> list[InventoryItem]:
        with self.session_scope() as session:
            rows = session.query(BraceletRow).order_by(literal_column("rowid")).all()
            return [self._to_domain(row) for row in rows]

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        with self.session_scope() as session:
            row = self._find(session, item_id)
            return None if row is None else self._to_domain(row)

    def exists(self, item_id: str) -> bool:
        with self.session_scope() as session:
            return self._find(session, item_id) is not None

    def insert(self, item: InventoryItem) -> bool:
        with self.session_scope() as session:
            if self._find(session, item.id) is not None:
                return False
            session.add(
                BraceletRow(
                    id=item.id,
                    id_key=_key(item.id),
                    description=item.description,
                    quantity=item.quantity,
                    price=item.price,
                    status=item.status.value,
                )
            )
            return True

    def update(self, item: InventoryItem) -> bool:
        with self.session_scope() as session:
            row = self._find(session, item.id)
            if row is None:
                return False
            row.description = item.description
            row.quantity = item.quantity
            row.price = item.price
            row.status = item.status.value
            return True

    def delete(self, item_id: str) -> bool:
        with self.session_scope() as session:
            row = self._find(session, item_id)
            if row is None:
                return False
            session.delete(row)
            return True

    # --- Mapping helpers ------------------------------------------------------

    @staticmethod
    def _find(session: Session, item_id: str) -> BraceletRow | None:
        return (
            session.query(BraceletRow)
            .filter(BraceletRow.id_key == _key(item_id))
            .first()
        )

    @staticmethod
    def _to_domain(row: BraceletRow) -> InventoryItem:
        return InventoryItem(
            id=row.id,
            description=row.description,
            quantity=row.quantity,
            price=row.price,
            status=StockStatus(row.status),
        )


def _key(item_id: str) -> str:
    return item_id.strip().lower()
