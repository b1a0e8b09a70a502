from fastapi import Depends
from sqlalchemy.orm import Session

from shared.core.database import get_estate_db
from shared.core.store import DataStore


# Dependency
def get_store(db: Session = Depends(get_estate_db)) -> DataStore:
    return DataStore(db)
