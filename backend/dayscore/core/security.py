"""Bearer token extraction and the per-request identity dependency."""
from __future__ import annotations

from typing import Optional

from fastapi import Request

from dayscore.core.errors import AuthError

BEARER_PREFIX = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthError("Missing bearer token")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_PREFIX or not token or " " in token:
        raise AuthError("Malformed Authorization header")
    return token


def get_current_user_id(request: Request) -> Optional[str]:
    """Identity for this request; ``None`` when the app runs without auth."""
    resolver = request.app.state.identity_resolver
    if resolver is None:
        return None
    token = extract_bearer_token(request.headers.get("Authorization"))
    return resolver.resolve(token)
