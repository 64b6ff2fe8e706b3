"""Human-readable order numbers."""

import re
import secrets
from datetime import datetime
from typing import Optional

from boardshop.domain.shared.time import utc_now

# ORD-<UTC yyyymmddHHMMSS>-<6 hex>
ORDER_NUMBER_PATTERN = re.compile(r"^ORD-\d{14}-[0-9A-F]{6}$")


def generate_order_number(now: Optional[datetime] = None) -> str:
    """Return a fresh order number. Uniqueness is checked by the caller."""
    timestamp = (now or utc_now()).strftime("%Y%m%d%H%M%S")
    return f"ORD-{timestamp}-{secrets.token_hex(3).upper()}"
