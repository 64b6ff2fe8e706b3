"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from boardshop.domain.user.aggregates.user import User
from boardshop.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier (UUID4)

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return all users, newest first."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        If the user exists (by ID), updates it.
        If the user doesn't exist, creates it.

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """
        Delete a user by ID.

        Addresses and preferences are removed with the user; orders are not,
        callers must check for them first.
        """
