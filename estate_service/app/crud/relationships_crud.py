# app/crud/relationships_crud.py
"""Property <-> owner/broker bookkeeping.

The forms pick at most one owner and one broker per property, while the join
tables allow many. Setting either one replaces every existing join row of the
property; the previous rows are returned so a saga can put them back.
"""
import logging
from typing import List, Optional
from uuid import UUID

from shared.core.store import DataStore, DataStoreError, Row

logger = logging.getLogger(__name__)

FULL_OWNERSHIP = 100


def _replace_links(store: DataStore, collection: str, property_id: UUID, row: Optional[Row]) -> List[Row]:
    previous = store.delete(collection, {"property_id": property_id})
    if row is not None:
        try:
            store.insert(collection, {"property_id": property_id, **row})
        except DataStoreError:
            # the delete already committed
            _restore_links(store, collection, property_id, previous)
            raise
    return previous


def _restore_links(store: DataStore, collection: str, property_id: UUID, previous: Optional[List[Row]]):
    store.delete(collection, {"property_id": property_id})
    for row in previous or []:
        store.insert(collection, dict(row))


def set_property_owner(store: DataStore, property_id: UUID, owner_id: Optional[UUID]) -> List[Row]:
    row = None
    if owner_id:
        row = {"owner_id": owner_id, "ownership_percentage": FULL_OWNERSHIP}
    return _replace_links(store, "property_owners", property_id, row)


def set_property_broker(store: DataStore, property_id: UUID, broker_id: Optional[UUID]) -> List[Row]:
    row = {"broker_id": broker_id} if broker_id else None
    return _replace_links(store, "property_brokers", property_id, row)


def restore_property_owners(store: DataStore, property_id: UUID, previous: Optional[List[Row]]):
    _restore_links(store, "property_owners", property_id, previous)


def restore_property_brokers(store: DataStore, property_id: UUID, previous: Optional[List[Row]]):
    _restore_links(store, "property_brokers", property_id, previous)


def primary_owner(store: DataStore, property_id: UUID) -> Optional[Row]:
    """Owner of the oldest ownership row, the one a single-select form shows."""
    links = store.select(
        "property_owners", {"property_id": property_id},
        embed=["owner"], order_by="created_at", limit=1)
    if not links:
        return None
    return links[0].get("owner")


def properties_for_owner(store: DataStore, owner_id: UUID) -> List[Row]:
    links = store.select("property_owners", {"owner_id": owner_id})
    property_ids = list({link["property_id"] for link in links})
    if not property_ids:
        return []
    return store.select("properties", {"id": property_ids}, order_by="title")


def ensure_property_owner(store: DataStore, property_id: UUID, owner_id: UUID) -> Optional[Row]:
    """Link owner and property unless they already are; returns the new row."""
    existing = store.select_one(
        "property_owners", {"property_id": property_id, "owner_id": owner_id})
    if existing is not None:
        return None
    return store.insert("property_owners", {
        "property_id": property_id,
        "owner_id": owner_id,
        "ownership_percentage": FULL_OWNERSHIP,
    })


def remove_property_owner_link(store: DataStore, link: Optional[Row]):
    if link is not None:
        store.delete("property_owners", {"id": link["id"]})


def set_property_status(store: DataStore, property_id: UUID, status: str) -> Optional[str]:
    """Returns the status the property had before."""
    current = store.select_one("properties", {"id": property_id})
    if current is None:
        return None
    if current["status"] != status:
        store.update("properties", {"status": status}, {"id": property_id})
        logger.info("Property %s status %s -> %s", property_id, current["status"], status)
    return current["status"]


def restore_property_status(store: DataStore, property_id: UUID, previous: Optional[str]):
    if previous is not None:
        store.update("properties", {"status": previous}, {"id": property_id})
