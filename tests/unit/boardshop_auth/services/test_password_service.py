"""Unit tests for PasswordHashingService."""

import bcrypt
import pytest

from boardshop_auth.exceptions import WeakPasswordError
from boardshop_auth.services import PasswordHashingService


class TestPasswordHashing:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        password_hash = self.service.hash("password123")

        assert password_hash != "password123"
        assert self.service.verify("password123", password_hash)
        assert not self.service.verify("password124", password_hash)

    def test_hash_is_salted(self):
        assert self.service.hash("password123") != self.service.hash("password123")

    def test_verify_with_malformed_hash_returns_false(self):
        assert self.service.verify("password123", "not-a-bcrypt-hash") is False

    @pytest.mark.parametrize("password", ["", "short", "x" * 129])
    def test_weak_passwords_rejected(self, password):
        with pytest.raises(WeakPasswordError):
            self.service.hash(password)

    def test_needs_rehash_on_different_rounds(self):
        password_hash = PasswordHashingService(rounds=5).hash("password123")

        assert self.service.needs_rehash(password_hash)
        assert not PasswordHashingService(rounds=5).needs_rehash(password_hash)

    def test_needs_rehash_on_malformed_hash(self):
        assert self.service.needs_rehash("not-a-bcrypt-hash")

    def test_rehash_upgrades_outdated_factor(self):
        outdated = PasswordHashingService(rounds=5).hash("password123")

        upgraded = self.service.rehash("password123", outdated)

        assert upgraded is not None
        assert upgraded.startswith("$2b$04$")
        assert self.service.verify("password123", upgraded)

    def test_rehash_skips_current_hash(self):
        current = self.service.hash("password123")

        assert self.service.rehash("password123", current) is None

    def test_rehash_keeps_passwords_from_older_length_rules(self):
        legacy = bcrypt.hashpw(b"short", bcrypt.gensalt(rounds=5)).decode()

        upgraded = self.service.rehash("short", legacy)

        assert self.service.verify("short", upgraded)
