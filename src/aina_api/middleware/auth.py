"""
Caller identification for the sensor metrics route.

Two credential forms are accepted, checked in this order:
  X-API-Key header (or ?api_key=)  → active row in the `api_keys` table
  Authorization: Bearer <jwt>      → Supabase-issued HS256 access token

Anonymous callers get None; the public data routes never ask for a user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog
from fastapi import Request
from jose import JWTError, jwt

from aina_shared.config import settings
from aina_shared.db import get_supabase_client

from aina_api.responses import DashboardError

logger = structlog.get_logger(__name__)

JWT_AUDIENCE = "authenticated"


@dataclass
class AuthUser:
    user_id: str
    email: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def _validate_jwt(token: str) -> dict[str, Any] | None:
    """Decoded claims, or None if the signature, expiry or audience is wrong."""
    try:
        return jwt.decode(
            token, settings.jwt_secret, algorithms=["HS256"], audience=JWT_AUDIENCE
        )
    except JWTError as exc:
        logger.info("jwt_rejected", error=str(exc))
        return None


def _user_for_api_key(api_key: str) -> AuthUser:
    try:
        result = (
            get_supabase_client(service_role=True)
            .table("api_keys")
            .select("user_id, email, metadata")
            .eq("key", api_key)
            .eq("active", True)
            .limit(1)
            .execute()
        )
    except Exception as exc:
        raise DashboardError.upstream("Failed to verify API key", exc) from exc
    if not result.data:
        raise DashboardError.unauthorized("Invalid API key")
    row = result.data[0]
    return AuthUser(
        user_id=str(row["user_id"]),
        email=row.get("email"),
        metadata=row.get("metadata") or {},
    )


def _user_for_bearer(token: str) -> AuthUser:
    claims = _validate_jwt(token)
    if claims is None or not claims.get("sub"):
        raise DashboardError.unauthorized("Invalid or expired token")
    return AuthUser(
        user_id=claims["sub"],
        email=claims.get("email"),
        metadata=claims.get("user_metadata") or {},
    )


async def get_current_user(request: Request) -> AuthUser | None:
    """FastAPI dependency: the authenticated caller, or None. 401 on bad credentials."""
    api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
    if api_key:
        return _user_for_api_key(api_key)

    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and token:
        return _user_for_bearer(token)

    return None
