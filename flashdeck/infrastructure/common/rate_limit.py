"""Shared slowapi limiter; registered on app.state by the application factory."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from flashdeck.config import get_settings

settings = get_settings()

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
