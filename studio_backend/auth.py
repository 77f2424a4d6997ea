"""
Caller identity resolution.

The demo resolver accepts any well-formed bearer token and maps it to one
fixed identity. It does no verification. Deployments must override
`get_user_resolver` with a resolver that verifies tokens against their
identity provider and yields a distinct id per user.
"""

from __future__ import annotations

from typing import Optional, Protocol

from fastapi import Depends, Header, HTTPException

DEMO_USER_ID = "demo-user"
BEARER_PREFIX = "Bearer "
UNAUTHENTICATED_MESSAGE = "Missing or invalid authorization token"


class UserResolver(Protocol):
    def resolve(self, token: str) -> Optional[str]:
        ...


class DemoUserResolver:
    def resolve(self, token: str) -> Optional[str]:
        return DEMO_USER_ID if token else None


_user_resolver: UserResolver | None = None


def get_user_resolver() -> UserResolver:
    global _user_resolver
    if _user_resolver:
        return _user_resolver
    _user_resolver = DemoUserResolver()
    return _user_resolver


def extract_bearer_token(authorization: str | None) -> Optional[str]:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):]
    return token or None


def require_user(
    authorization: str | None = Header(default=None),
    resolver: UserResolver = Depends(get_user_resolver),
) -> str:
    token = extract_bearer_token(authorization)
    user_id = resolver.resolve(token) if token else None
    if not user_id:
        raise HTTPException(status_code=401, detail=UNAUTHENTICATED_MESSAGE)
    return user_id
