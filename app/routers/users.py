from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import require_admin
from app.permissions import users_scope
from app.schemas.common import success
from app.schemas.user import UserOut
from app.stores import UserStore
from app.utils.auth import Identity

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
def list_users(identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    users = UserStore(db).find_many(**users_scope(identity))
    return success([UserOut.model_validate(u) for u in users])
