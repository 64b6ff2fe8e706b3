from enum import Enum


class AddressType(str, Enum):
    """Purpose of a stored address."""

    SHIPPING = "SHIPPING"
    BILLING = "BILLING"
