from flashdeck.infrastructure.identity.services import token_service


class TokenServiceAdapter:
    """Adapter wrapping token service functions for DI."""

    def create_access_token(self, user_id: int, email: str) -> str:
        return token_service.create_access_token(user_id, email)

    def verify_access_token(self, token: str) -> int | None:
        return token_service.verify_access_token(token)

    def create_password_reset_token(self, user_id: int, hashed_password: str) -> str:
        return token_service.create_password_reset_token(user_id, hashed_password)

    def verify_password_reset_token(self, token: str, user_id: int, hashed_password: str) -> bool:
        return token_service.verify_password_reset_token(token, user_id, hashed_password)
