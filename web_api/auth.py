"""
Session verification for the web API.

Tokens are HS256 JWTs in the "session" cookie, with the user id in "sub".
Issuing tokens (login) is handled elsewhere; this module only checks them.
"""

import os

import jwt
from fastapi import Depends, HTTPException, Request

JWT_SECRET = os.environ.get("JWT_SECRET")
JWT_ALGORITHM = "HS256"


def verify_jwt(token: str) -> dict | None:
    """
    Verify and decode a JWT token.

    Returns:
        Decoded payload dict if valid, None if invalid
    """
    if not JWT_SECRET:
        raise ValueError("JWT_SECRET environment variable not set")

    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        return None


async def get_current_user(request: Request) -> dict:
    """
    FastAPI dependency to get the current authenticated user.

    Returns:
        {"user_id": int, **payload}

    Raises:
        HTTPException: 401 if not authenticated or invalid token
    """
    token = request.cookies.get("session")
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = verify_jwt(token)
    if not payload or "sub" not in payload:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return {**payload, "user_id": user_id}


async def require_admin(user: dict = Depends(get_current_user)) -> dict:
    """
    FastAPI dependency that only lets admins through.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin
    """
    from core.database import get_connection
    from core.queries.users import get_user_by_id

    async with get_connection() as conn:
        db_user = await get_user_by_id(conn, user["user_id"])

    if not db_user or not db_user.get("is_admin"):
        raise HTTPException(status_code=403, detail="Admin access required")

    return db_user
