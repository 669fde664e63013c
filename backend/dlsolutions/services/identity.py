"""Identity provider: resolves a bearer token to an account holder."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import jwt

from dlsolutions.core.config import settings
from dlsolutions.core.errors import AuthError

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class Identity:
    user_id: str
    email: str | None = None
    role: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class IdentityProvider(ABC):
    @abstractmethod
    def resolve(self, token: str) -> Identity:
        """Return the identity behind ``token`` or raise ``AuthError``."""
        pass  # pragma: no cover


class JWTIdentityProvider(IdentityProvider):
    """Verifies HS256 access tokens issued by the auth backend.

    The account holder id is the ``sub`` claim; the admin role is read from
    ``app_metadata.role``.
    """

    def __init__(self, secret: str | None = None, audience: str | None = None):
        self.secret = secret or settings.AUTH_JWT_SECRET
        self.audience = audience or settings.AUTH_JWT_AUDIENCE

    def resolve(self, token: str) -> Identity:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self.secret,
                algorithms=["HS256"],
                audience=self.audience,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthError("Token has expired") from None
        except jwt.InvalidTokenError:
            raise AuthError("Invalid token") from None

        user_id = str(payload.get("sub") or "")
        if not user_id:
            raise AuthError("Invalid token")
        app_metadata = payload.get("app_metadata") or {}
        role = app_metadata.get("role") if isinstance(app_metadata, dict) else None
        return Identity(user_id=user_id, email=payload.get("email"), role=role)


def get_identity_provider() -> IdentityProvider:
    """Dependency returning the configured identity provider."""
    return JWTIdentityProvider()
