import logging
from typing import Dict, Optional, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Contact(BaseModel):
    name: str = ""
    phone: str = ""
    email: Optional[str] = None


class ContactPickerUnavailable(Exception):
    """The device or browser offers no contact picker."""


class ContactPicker(Protocol):
    def pick(self) -> Optional[Contact]:
        ...


def get_contact_picker() -> Optional[ContactPicker]:
    # No picker on the server side; deployments with one override this dependency
    return None


def prefill_from_contact(picker: Optional[ContactPicker], name_field: str = "full_name") -> Dict[str, Optional[str]]:
    """Form defaults seeded from a picked contact, or blanks for manual entry."""
    defaults: Dict[str, Optional[str]] = {name_field: "", "phone": "", "email": ""}
    if picker is None:
        return defaults

    try:
        contact = picker.pick()
    except ContactPickerUnavailable as exc:
        logger.info("Contact picker unavailable, falling back to manual entry: %s", exc)
        return defaults

    if contact is None:
        return defaults

    defaults[name_field] = contact.name
    defaults["phone"] = contact.phone
    defaults["email"] = contact.email or ""
    return defaults
