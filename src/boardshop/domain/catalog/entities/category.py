"""Category entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from boardshop.domain.shared.exceptions import ValidationError
from boardshop.domain.shared.time import utc_now


@dataclass
class Category:
    """A named product group. Names are unique across the catalog."""

    name: str
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self.name = self._validated_name(self.name)

    def rename(self, name: str) -> None:
        self.name = self._validated_name(name)
        self.updated_at = utc_now()

    def describe(self, description: Optional[str]) -> None:
        self.description = description
        self.updated_at = utc_now()

    @staticmethod
    def _validated_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            msg = "Category name cannot be empty"
            raise ValidationError(msg)
        return name
