from typing import Protocol


class TokenServiceProtocol(Protocol):
    def create_access_token(self, user_id: int, email: str) -> str: ...

    def verify_access_token(self, token: str) -> int | None: ...

    def create_password_reset_token(self, user_id: int, hashed_password: str) -> str: ...

    def verify_password_reset_token(
        self, token: str, user_id: int, hashed_password: str
    ) -> bool: ...
