"""Address entity."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from boardshop.domain.shared.exceptions import ValidationError
from boardshop.domain.shared.time import utc_now
from boardshop.domain.user.value_objects import AddressType

CLEARABLE_FIELDS = frozenset({"company", "address_line2", "phone"})


@dataclass
class Address:
    """
    A postal address owned by one user.

    At most one address per (user, type) is the default. The entity itself
    only carries the flag; clearing the sibling defaults is done by the
    repository within the same transaction.
    """

    user_id: UUID
    first_name: str
    last_name: str
    address_line1: str
    city: str
    state: str
    postal_code: str
    type: AddressType = AddressType.SHIPPING
    company: Optional[str] = None
    address_line2: Optional[str] = None
    country: str = "US"
    phone: Optional[str] = None
    is_default: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not isinstance(self.type, AddressType):
            self.type = AddressType(self.type)

    def update(self, **changes: Any) -> None:
        """
        Apply the given fields; fields not passed are kept.

        ``None`` clears company, address_line2 and phone. It is rejected for
        every other field, and nothing is changed in that case.
        """
        updatable = {f.name for f in fields(self)} - {"id", "user_id", "created_at"}
        for key, value in changes.items():
            if key not in updatable:
                msg = f"Address field cannot be updated: {key}"
                raise AttributeError(msg)
            if value is None and key not in CLEARABLE_FIELDS:
                msg = f"Address field '{key}' cannot be empty"
                raise ValidationError(msg, details={"field": key})

        for key, value in changes.items():
            setattr(self, key, value)
        if not isinstance(self.type, AddressType):
            self.type = AddressType(self.type)
        self.updated_at = utc_now()
