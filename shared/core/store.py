"""Query-and-mutate access to the estate collections.

Views never build queries themselves; they receive a ``DataStore`` and use
the calls below, addressing collections by table name and getting plain
dict rows back.

Embedding follows the PostgREST convention the screens were written against,
resolved through the ``relationship()`` attributes on the mapped models:
``embed=["property"]`` on ``rent_agreements`` attaches
``RentAgreement.property``; ``embed=["property_owners"]`` on ``properties``
attaches the list of join rows. Dotted paths nest,
e.g. ``"property_owners.owner"``.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from shared.core.database import Base

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
EmbedTree = Dict[str, "EmbedTree"]


class DataStoreError(Exception):
    """Raised when the store rejects a read or a write.

    ``message`` keeps the backend's own wording so it can be shown verbatim.
    """

    def __init__(self, message: str, collection: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.collection = collection


def _backend_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _embed_tree(paths: Optional[Sequence[str]]) -> EmbedTree:
    tree: EmbedTree = {}
    for path in paths or []:
        level = tree
        for name in path.split("."):
            level = level.setdefault(name, {})
    return tree


def _as_row(obj, tree: EmbedTree) -> Row:
    mapper = inspect(obj).mapper
    row = {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}
    for name, children in tree.items():
        value = getattr(obj, name)
        if mapper.relationships[name].uselist:
            row[name] = [_as_row(child, children) for child in value]
        else:
            row[name] = _as_row(value, children) if value is not None else None
    return row


class DataStore:
    """Session-backed store; every write commits on its own."""

    def __init__(self, db: Session, base=Base):
        self.db = db
        self.base = base

    # ------------------------------------------------------------------
    # schema helpers
    # ------------------------------------------------------------------

    def model(self, collection: str):
        for mapper in self.base.registry.mappers:
            if mapper.local_table.name == collection:
                return mapper.class_
        raise DataStoreError(f'relation "{collection}" does not exist', collection)

    def column(self, model, field: str):
        column = model.__table__.c.get(field)
        if column is None:
            table = model.__tablename__
            raise DataStoreError(f"column {table}.{field} does not exist", table)
        return column

    def _loaders(self, model, tree: EmbedTree, parent=None) -> list:
        options = []
        for name, children in tree.items():
            relationship = inspect(model).relationships.get(name)
            if relationship is None:
                table = model.__tablename__
                raise DataStoreError(
                    f"Could not find a relationship between '{table}' and '{name}'", table)

            attribute = getattr(model, name)
            loader = selectinload(attribute) if parent is None else parent.selectinload(attribute)
            # a nested loader carries its whole path, so the parent is only kept at a leaf
            options.extend(
                self._loaders(relationship.mapper.class_, children, loader) or [loader])
        return options

    def _where(
        self,
        model,
        filters: Dict[str, Any],
        gte: Optional[Dict[str, Any]] = None,
        lt: Optional[Dict[str, Any]] = None,
    ) -> list:
        clauses = []
        for field, value in filters.items():
            column = self.column(model, field)
            if isinstance(value, (list, tuple, set)):
                clauses.append(column.in_(list(value)))
            elif value is None:
                clauses.append(column.is_(None))
            else:
                clauses.append(column == value)
        for field, value in (gte or {}).items():
            clauses.append(self.column(model, field) >= value)
        for field, value in (lt or {}).items():
            clauses.append(self.column(model, field) < value)
        return clauses

    def _fail(self, exc: SQLAlchemyError, collection: str):
        self.db.rollback()
        message = _backend_message(exc)
        logger.error("Store operation on %s failed: %s", collection, message)
        raise DataStoreError(message, collection) from exc

    def _objects(self, model, filters: Dict[str, Any]) -> list:
        query = select(model).where(*self._where(model, filters))
        return self.db.execute(query).scalars().all()

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------

    def select(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        embed: Optional[Sequence[str]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
        gte: Optional[Dict[str, Any]] = None,
        lt: Optional[Dict[str, Any]] = None,
    ) -> List[Row]:
        """Rows of ``collection`` matching every filter.

        A list filter value means "one of", ``None`` means IS NULL. ``gte``
        and ``lt`` add inclusive-lower and exclusive-upper bounds per column.
        """
        model = self.model(collection)
        tree = _embed_tree(embed)
        query = (
            select(model)
            .where(*self._where(model, filters or {}, gte, lt))
            .options(*self._loaders(model, tree))
        )
        if order_by:
            column = self.column(model, order_by)
            query = query.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            query = query.limit(limit)

        try:
            objects = self.db.execute(query).scalars().all()
            return [_as_row(obj, tree) for obj in objects]
        except SQLAlchemyError as exc:
            self._fail(exc, collection)

    def select_one(
        self,
        collection: str,
        filters: Dict[str, Any],
        embed: Optional[Sequence[str]] = None,
    ) -> Optional[Row]:
        rows = self.select(collection, filters, embed=embed, limit=1)
        return rows[0] if rows else None

    def count(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        model = self.model(collection)
        query = select(func.count()).select_from(model).where(
            *self._where(model, filters or {}))
        try:
            return self.db.execute(query).scalar() or 0
        except SQLAlchemyError as exc:
            self._fail(exc, collection)

    # ------------------------------------------------------------------
    # writes
    # ------------------------------------------------------------------

    def insert(self, collection: str, row: Row) -> Row:
        model = self.model(collection)
        for field in row:
            self.column(model, field)

        obj = model(**row)
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return _as_row(obj, {})
        except SQLAlchemyError as exc:
            self._fail(exc, collection)

    def update(self, collection: str, patch: Row, filters: Dict[str, Any]) -> List[Row]:
        model = self.model(collection)
        for field in patch:
            self.column(model, field)

        try:
            objects = self._objects(model, filters)
            for obj in objects:
                for field, value in patch.items():
                    setattr(obj, field, value)
            self.db.commit()
            return [_as_row(obj, {}) for obj in objects]
        except SQLAlchemyError as exc:
            self._fail(exc, collection)

    def delete(self, collection: str, filters: Dict[str, Any]) -> List[Row]:
        """Delete matching rows; relationship cascades remove dependent rows."""
        model = self.model(collection)
        try:
            objects = self._objects(model, filters)
            rows = [_as_row(obj, {}) for obj in objects]
            for obj in objects:
                self.db.delete(obj)
            self.db.commit()
            return rows
        except SQLAlchemyError as exc:
            self._fail(exc, collection)
