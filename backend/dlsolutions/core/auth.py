from fastapi import Depends, Request

from dlsolutions.core.errors import AuthError
from dlsolutions.services.identity import Identity, IdentityProvider, get_identity_provider


def get_current_identity(
    request: Request,
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    """Resolve the ``Authorization: Bearer <token>`` header to an identity."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthError("Missing authentication token")

    token = auth_header[7:].strip()
    if not token:
        raise AuthError("Missing authentication token")

    return provider.resolve(token)


def get_current_user(identity: Identity = Depends(get_current_identity)) -> str:
    """Return the verified account holder id."""
    return identity.user_id


def get_current_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """Require an identity carrying the admin role."""
    if not identity.is_admin:
        raise AuthError("Admin access required")
    return identity
