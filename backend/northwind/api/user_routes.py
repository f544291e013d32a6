# backend/northwind/api/user_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from northwind.api.deps_auth import get_current_principal, get_db, require_admin
from northwind.api.schemas import MessageOut, UserOut, UserRequest
from northwind.core.errors import AlreadyExists, Forbidden, NotFound, PersistenceFailure
from northwind.core.policies import Principal, can_access_user
from northwind.core.roles import Role
from northwind.models import User
from northwind.services.user_service import UserService

router = APIRouter()


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def _get_user(users: UserService, user_id: int) -> User:
    user = users.get_by_id(user_id)
    if user is None:
        raise NotFound(f"User with id {user_id} not found")
    return user


@router.get("", response_model=List[UserOut], dependencies=[Depends(require_admin)])
def list_users(users: UserService = Depends(get_user_service)):
    return users.get_all()


@router.get("/{user_id:int}", response_model=UserOut, dependencies=[Depends(require_admin)])
def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return _get_user(users, user_id)


@router.get("/{username}", response_model=UserOut)
def get_user_by_username(
    username: str,
    users: UserService = Depends(get_user_service),
    principal: Principal = Depends(get_current_principal),
):
    user = users.get_by_username(username)
    if user is None:
        raise NotFound(f"User with username {username} not found")

    if not can_access_user(principal, user.user_identifier):
        raise Forbidden("Users may only retrieve their own record")
    return user


@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def add_user(payload: UserRequest, users: UserService = Depends(get_user_service)):
    if users.get_by_username(payload.username) is not None:
        raise AlreadyExists(f"User with username {payload.username} already exists")

    role = Role.parse(payload.role)

    user = User(username=payload.username, role=role)
    users.add(user, payload.password)
    if not users.is_saved_to_db():
        raise PersistenceFailure("Unable to save user")
    return user


@router.delete("/{user_id:int}", response_model=MessageOut, dependencies=[Depends(require_admin)])
def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    user = _get_user(users, user_id)

    users.delete(user)
    if not users.is_saved_to_db():
        raise PersistenceFailure("Unable to delete user")
    return MessageOut(message=f"User with id '{user_id}' has been deleted")
