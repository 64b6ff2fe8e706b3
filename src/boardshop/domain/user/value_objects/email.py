"""Customer email address; the login identifier of every account."""

import re
from dataclasses import dataclass

from boardshop.domain.user.exceptions import InvalidEmailError

# local-part@host.tld, nothing stricter
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """
    Lowercased, trimmed email address.

    Two accounts can never differ only by letter case, so lookups and the
    unique index both work on the normalized form.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            msg = "Email address is required"
            raise InvalidEmailError(msg)

        if not EMAIL_PATTERN.match(normalized):
            msg = f"'{self.value}' is not a valid email address"
            raise InvalidEmailError(msg)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
