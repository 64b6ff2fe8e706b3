from datetime import date, datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from boardshop.domain.shared.time import utc_now
from boardshop.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    A shop account: identity, credentials (as a hash only), role, activation
    flag and the personal profile fields. Each user is uniquely identified
    by a random UUID generated at creation time.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
        is_active: bool = True,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        avatar: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id if id is not None else uuid4()
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._is_active = is_active
        self._first_name = first_name
        self._last_name = last_name
        self._phone = phone
        self._date_of_birth = date_of_birth
        self._avatar = avatar
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def first_name(self) -> Optional[str]:
        return self._first_name

    @property
    def last_name(self) -> Optional[str]:
        return self._last_name

    @property
    def phone(self) -> Optional[str]:
        return self._phone

    @property
    def date_of_birth(self) -> Optional[date]:
        return self._date_of_birth

    @property
    def avatar(self) -> Optional[str]:
        return self._avatar

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._is_active = True
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        self._is_active = False
        self._updated_at = utc_now()

    def update_profile(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        avatar: Optional[str] = None,
    ) -> None:
        # Only provided (non-None) values are updated; others are preserved.
        if first_name is not None:
            self._first_name = first_name
        if last_name is not None:
            self._last_name = last_name
        if phone is not None:
            self._phone = phone
        if date_of_birth is not None:
            self._date_of_birth = date_of_birth
        if avatar is not None:
            self._avatar = avatar
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        email: Union[str, Email],
        password_hash: str,
        role: UserRole = UserRole.USER,
        is_active: bool = True,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> "User":
        return cls(
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            date_of_birth=date_of_birth,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: str,
        password_hash: str,
        role: Union[str, UserRole],
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        date_of_birth: Optional[date] = None,
        avatar: Optional[str] = None,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            date_of_birth=date_of_birth,
            avatar=avatar,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
