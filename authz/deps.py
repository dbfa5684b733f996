from typing import Optional

from fastapi import Depends

from auth.schemas import Identity
from auth.services.auth_service import authenticate
from core.errors import UnauthorizedError


def require_logged_in(identity: Optional[Identity] = Depends(authenticate)) -> Identity:
    if identity is None:
        raise UnauthorizedError()
    return identity

def require_admin(identity: Optional[Identity] = Depends(authenticate)) -> Identity:
    if identity is None or not identity.is_admin:
        raise UnauthorizedError()
    return identity

# username comes from the route path, e.g. /users/{username}
def require_self_or_admin(username: str, identity: Optional[Identity] = Depends(authenticate)) -> Identity:
    if identity is None or not (identity.username == username or identity.is_admin):
        raise UnauthorizedError()
    return identity
