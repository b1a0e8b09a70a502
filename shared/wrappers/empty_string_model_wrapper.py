import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def blank_to_none(value: Any):
    """Trim form input recursively; blank strings become None.

    Phone numbers picked from a device often carry bidi marks, those are
    dropped as well.
    """
    if isinstance(value, dict):
        return {k: blank_to_none(v) for k, v in value.items()}

    if isinstance(value, list):
        return [blank_to_none(v) for v in value]

    if isinstance(value, str) and not isinstance(value, Enum):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return cleaned or None

    return value


class EmptyStringModel(BaseModel):
    """Base for form payloads and query params.

    An empty text box arrives as "" and must behave like a missing value:
    optional fields store NULL and required fields fail validation before
    any write happens.
    """

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "use_enum_values": True,
        "validate_default": True,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return blank_to_none(values)
        return values
