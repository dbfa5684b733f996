import logging
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.schemas import Identity
from auth.utils.auth_utils import decode_token

log = logging.getLogger("openings.auth")

# auto_error=False: a missing header is not an error here
bearer_scheme = HTTPBearer(auto_error=False)


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Identity]:
    """Identity from the bearer token, or None.

    Never rejects a request: a missing or invalid token just means there is
    no identity, and the route's policy decides what that means.
    """
    if credentials is None:
        return None
    try:
        return decode_token(credentials.credentials)
    except (jwt.InvalidTokenError, ValueError) as e:
        log.info("authn ignored invalid token reason=%s", e)
        return None
