from enum import Enum


class UserRole(str, Enum):
    """Roles that gate access to shop operations."""

    USER = "USER"
    ADMIN = "ADMIN"
