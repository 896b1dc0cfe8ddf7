"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

# Verified against when the account is unknown; never matches a real password
_DUMMY_PASSWORD = "dummy_password_for_timing_attack_prevention"  # noqa: S105


class PasswordService:
    """
    Argon2 hashing (pwdlib's recommended setup) with an application-wide pepper.

    The pepper is appended to every password before hashing, so changing
    PASSWORD_PEPPER invalidates all stored hashes.
    """

    def __init__(self, pepper: str = "") -> None:
        self.pepper = pepper
        self.password_hash = PasswordHash.recommended()
        self._dummy_hash: str | None = None

    def hash_password(self, plain_password: str) -> str:
        return self.password_hash.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self.password_hash.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        """A real hash, so a failed lookup costs as much as a wrong password."""
        if self._dummy_hash is None:
            self._dummy_hash = self.password_hash.hash(_DUMMY_PASSWORD)
        return self._dummy_hash
