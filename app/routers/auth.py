import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_identity
from app.errors import Conflict, BadRequest, Unauthorized
from app.schemas.common import success
from app.schemas.user import SignupIn, LoginIn, UserOut, MeOut
from app.stores import UserStore
from app.utils.auth import Identity, hash_password, verify_password, create_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=201)
def signup(payload: SignupIn, db: Session = Depends(get_db)):
    users = UserStore(db)
    if users.find_by_email(payload.email):
        raise Conflict("Email already registered")

    try:
        hashed = hash_password(payload.password)
    except ValueError as e:
        # map hashing/validation errors to a 400 so client gets a clear message
        raise BadRequest(str(e))

    try:
        user = users.create(name=payload.name, email=payload.email, password=hashed, role=payload.role)
    except IntegrityError:
        # a concurrent signup claimed the email between lookup and insert
        db.rollback()
        raise Conflict("Email already registered")
    logger.info("signup user=%s role=%s", user.id, user.role)
    return success(UserOut.model_validate(user), message="User registered successfully")


@router.post("/login")
def login(payload: LoginIn, db: Session = Depends(get_db)):
    user = UserStore(db).find_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password):
        logger.info("failed login attempt")
        raise Unauthorized("Invalid email or password")

    token = create_token(user.id, user.role)
    logger.info("login user=%s", user.id)
    return success(UserOut.model_validate(user), message="Login successful", token=token)


@router.post("/logout")
def logout(identity: Identity = Depends(get_current_identity)):
    # tokens are stateless; the client drops its copy
    return success(message="Logout successful")


@router.get("/me")
def me(identity: Identity = Depends(get_current_identity)):
    return success(MeOut(user_id=identity.user_id, role=identity.role))
