"""bcrypt password hashing for customer and staff accounts."""

import bcrypt

from boardshop_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """
    Hashes and checks account passwords.

    The work factor comes from ``PASSWORD_BCRYPT_ROUNDS``; hashes stored with
    another factor still verify and are upgraded on the next login.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("kickflip-2024")
    >>> service.verify("kickflip-2024", stored)
    True
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    # Seeded accounts are hashed with this factor.
    DEFAULT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a new password after checking its length.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or too long
        """
        self.validate_strength(password)
        return self._hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Return whether ``password`` matches; a malformed hash never matches."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password is required"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password must be at most {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Whether ``password_hash`` was not produced with the configured factor."""
        # $2b$<rounds>$<salt+digest>
        parts = password_hash.split("$")
        if len(parts) < 4 or not parts[2].isdigit():
            return True
        return int(parts[2]) != self._rounds

    def rehash(self, password: str, password_hash: str) -> str | None:
        """
        Re-hash an already verified password when its stored factor is outdated.

        The length rules are not applied again, so accounts created under
        older rules keep working.

        Returns
        -------
        The new hash, or None when ``password_hash`` is current
        """
        if not self.needs_rehash(password_hash):
            return None
        return self._hash(password)

    def _hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
