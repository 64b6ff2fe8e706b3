"""User queries."""

from boardshop.application.queries.user.user_queries import (
    GetProfileQuery,
    GetUserPreferencesQuery,
    GetUserQuery,
    ListAddressesQuery,
    ListUsersQuery,
)

__all__ = [
    "GetProfileQuery",
    "GetUserPreferencesQuery",
    "GetUserQuery",
    "ListAddressesQuery",
    "ListUsersQuery",
]
