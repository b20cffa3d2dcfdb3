"""
Resolution of the acting principal for write operations.

Audit entries record who performed a basic-salary assignment. The caller
identifies itself with the ``X-Actor`` header; requests without one are
attributed to the configured default actor.
"""

from typing import Optional

from fastapi import Header
from pydantic import BaseModel

from .config import settings


class Actor(BaseModel):
    """Principal performing a request."""

    username: str


async def get_current_actor(
    x_actor: Optional[str] = Header(default=None, alias="X-Actor"),
) -> Actor:
    """Resolve the current actor from the request headers."""
    username = (x_actor or "").strip() or settings.default_actor
    return Actor(username=username)
