"""Shared request dependencies."""

from fastapi import Header, HTTPException, status


async def require_user_key(x_user_key: str | None = Header(default=None)) -> str:
    """Return the caller's storage scope; identity is established upstream."""
    if not x_user_key or not x_user_key.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Key"
        )
    return x_user_key.strip()
