from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext
from app.config import SECRET_KEY, ALGORITHM
from app.models.user import ROLES, ROLE_ADMIN

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class Identity:
    """Who is calling: the verified content of an access token."""
    user_id: int
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


class InvalidToken(Exception):
    pass


class TokenExpired(InvalidToken):
    pass


def hash_password(password: str):
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises ValueError if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if isinstance(password, str):
        b = password.encode("utf-8")
        if len(b) > BCRYPT_MAX_BYTES:
            # make the failure explicit and consistent
            raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain, hashed):
    """Verify a plaintext password against a hash.

    If verification raises a ValueError (for example plain >72 bytes), return False
    to allow the caller to respond with an authentication failure instead of an error.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_token(user_id: int, role: str) -> str:
    # read expiry at call-time so tests (and runtime overrides) that modify
    # app.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    import app.config as _cfg
    issued = datetime.now(UTC)
    expire = issued + timedelta(minutes=_cfg.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": str(user_id),
        "role": role,
        # JWT spec uses Unix timestamps
        "iat": int(issued.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Identity:
    """Verify signature and expiry and return the identity the token carries.

    Raises TokenExpired for an elapsed token and InvalidToken for anything
    else that fails: bad signature, garbage input or missing/unknown claims.
    """
    try:
        # jwt.decode validates exp automatically
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError as e:
        raise TokenExpired("token has expired") from e
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    sub = payload.get("sub")
    role = payload.get("role")
    if not sub or role not in ROLES:
        raise InvalidToken("token is missing identity claims")
    try:
        user_id = int(sub)
    except (TypeError, ValueError) as e:
        raise InvalidToken("token subject is not a user id") from e
    return Identity(user_id=user_id, role=role)
