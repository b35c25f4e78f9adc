# circumpolar/infrastructure/api/__init__.py
from .clients import AsyncMagDeclinationApiClient

__all__ = [
    "AsyncMagDeclinationApiClient",
]
