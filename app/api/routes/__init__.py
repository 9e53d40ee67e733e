"""API routes package"""

from app.api.routes import health, hello

__all__ = [
    "health",
    "hello",
]
