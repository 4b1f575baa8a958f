"""
Request-scoped dependencies shared by the routers.

Authentication happens upstream; by the time a request reaches
this service the caller's identity is in the X-User-Id header.
"""

from fastapi import Header, HTTPException


def get_actor(x_user_id: str | None = Header(default=None)) -> str:
    """Return the acting user's id or reject the request."""
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()
