from typing import Protocol

from flashdeck.domain.common.value_objects.ids import UserId
from flashdeck.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_email(self, email: str) -> User | None: ...

    def email_exists(self, email: str) -> bool: ...

    def save(self, user: User) -> User: ...
