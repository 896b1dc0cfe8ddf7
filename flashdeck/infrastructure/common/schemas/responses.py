"""Response bodies shared by several routers."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Confirmation with a human-readable message."""

    message: str = Field(..., description="Response message")

