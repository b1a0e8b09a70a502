from enum import Enum


class PropertyType(str, Enum):
    residential = "residential"
    commercial = "commercial"


class PropertyStatus(str, Enum):
    for_rent = "for_rent"
    for_sale = "for_sale"
    rented = "rented"
    sold = "sold"


class FurnishingStatus(str, Enum):
    furnished = "furnished"
    semi_furnished = "semi_furnished"
    unfurnished = "unfurnished"


class AgreementStatus(str, Enum):
    active = "active"
    expired = "expired"
    terminated = "terminated"
    pending_renewal = "pending_renewal"


# agreements that keep their property occupied
OCCUPYING_AGREEMENT_STATUSES = (
    AgreementStatus.active.value,
    AgreementStatus.pending_renewal.value,
)


class PaymentType(str, Enum):
    rent = "rent"
    security_deposit = "security_deposit"
    maintenance = "maintenance"
    utility = "utility"
    other = "other"


class PaymentStatus(str, Enum):
    completed = "completed"
    pending = "pending"
    failed = "failed"
    refunded = "refunded"


class PaymentMethod(str, Enum):
    online_transfer = "Online Transfer"
    upi = "UPI"
    cash = "Cash"
    check = "Check"
    bank_transfer = "Bank Transfer"
    other = "Other"


class RequirementType(str, Enum):
    rent = "rent"
    sale = "sale"
    both = "both"


class RequirementPropertyType(str, Enum):
    residential = "residential"
    commercial = "commercial"
    both = "both"


class RequirementStatus(str, Enum):
    open = "open"
    on_hold = "on_hold"
    closed = "closed"


class ExpiryUrgency(str, Enum):
    critical = "critical"   # under 15 days
    warning = "warning"     # under 30 days
    normal = "normal"
