# app/crud/common_crud.py
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from shared.core.schemas import Lookup
from shared.core.store import DataStore, DataStoreError, Row

logger = logging.getLogger(__name__)


def fetch_rows(store: DataStore, collection: str, **kwargs) -> List[Row]:
    """List reads degrade to an empty collection; the failure is only logged."""
    try:
        return store.select(collection, **kwargs)
    except DataStoreError as exc:
        logger.error("Error fetching %s: %s", collection, exc.message)
        return []


def fetch_one(store: DataStore, collection: str, filters: Dict[str, Any], embed=None) -> Optional[Row]:
    try:
        return store.select_one(collection, filters, embed=embed)
    except DataStoreError as exc:
        logger.error("Error fetching %s %s: %s", collection, filters, exc.message)
        return None


def enum_lookup(enum_cls: Type[Enum]) -> List[Lookup]:
    return [
        Lookup(id=member.value, name=member.name.replace("_", " ").title())
        for member in enum_cls
    ]


def name_lookup(rows: List[Row], field: str = "full_name") -> List[Lookup]:
    return [Lookup(id=row["id"], name=row[field]) for row in rows]
