from .responses import MessageResponse

__all__ = ["MessageResponse"]
