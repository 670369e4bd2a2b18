import logging
from typing import Optional
from fastapi import Depends, Header
from app.errors import Unauthorized
from app.permissions import ensure_admin
from app.utils.auth import Identity, InvalidToken, TokenExpired, decode_token

logger = logging.getLogger(__name__)


def _extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer ...`` header."""
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return None


def get_current_identity(authorization: Optional[str] = Header(None)) -> Identity:
    tok = _extract_token(authorization)
    if not tok:
        raise Unauthorized("Unauthorized, token is missing")
    try:
        return decode_token(tok)
    except TokenExpired:
        raise Unauthorized("Token has expired")
    except InvalidToken as e:
        logger.debug("rejected token: %s", e)
        raise Unauthorized("Unauthorized")


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    ensure_admin(identity)
    return identity
