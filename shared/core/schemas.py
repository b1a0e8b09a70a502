from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class CommonQueryParams(EmptyStringModel):
    search: Optional[str] = None


class Lookup(BaseModel):
    id: Union[str, UUID]  # accepts both UUID and str
    name: str

    class Config:
        from_attributes = True


class ListState(str, Enum):
    empty = "empty"          # nothing stored yet
    no_match = "no_match"    # rows exist, none matched the filters
    ready = "ready"


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str


class NotFoundDetail(BaseModel):
    list_url: str
    id: Optional[Any] = None
