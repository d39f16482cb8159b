from collections.abc import Callable

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventia.auth.dtos import Identity, Role
from eventia.auth.security import authenticate, require_role as check_role

bearer_scheme = HTTPBearer(auto_error=False)


def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity | None:
    """Identity from the ``Authorization: Bearer`` header, or ``None`` when absent.

    A present but invalid token is rejected here rather than treated as anonymous.
    """
    if credentials is None:
        return None
    return authenticate(credentials.credentials)


def require_role(*roles: Role) -> Callable[[Identity | None], Identity]:
    """Dependency factory: only callers holding one of ``roles`` get through."""

    def _role_dependency(identity: Identity | None = Depends(get_identity)) -> Identity:
        return check_role(identity, roles)

    return _role_dependency


require_user = require_role(Role.USER)
require_vendor = require_role(Role.VENDOR)
require_admin = require_role(Role.ADMIN)
require_authenticated = require_role(Role.USER, Role.VENDOR, Role.ADMIN)
