import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

T = TypeVar("T")

# Overriding container.db is process-wide; serialize it across threadpool workers
_override_lock = threading.Lock()


def build_use_case(provider: Provider[T], db: DatabaseSession) -> T:
    """Instantiate a use case from the container bound to the given session."""
    with _override_lock:
        container.db.override(db)
        try:
            return provider()
        finally:
            container.db.reset_override()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.db override with request-scoped database session.
    """

    def dependency(db: DatabaseSession) -> T:
        return build_use_case(provider, db)

    return dependency
