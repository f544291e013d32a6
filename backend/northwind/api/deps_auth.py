# backend/northwind/api/deps_auth.py

from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from northwind.core.config import Settings, get_settings
from northwind.core.database import SessionLocal
from northwind.core.errors import InvalidRole
from northwind.core.policies import Policy, Principal, evaluate
from northwind.core.roles import Role
from northwind.core.security import decode_token

# Only used by Swagger UI for the "Authorize" button.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_principal(
    token: str = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> Principal:
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token or not isinstance(token, str):
        raise cred_exc

    try:
        payload = decode_token(token, settings)
    except ValueError:
        raise cred_exc

    sub = payload.get("sub")
    if not sub:
        raise cred_exc

    try:
        role = Role.parse(payload.get("role"))
    except InvalidRole:
        raise cred_exc

    return Principal(identifier=str(sub), role=role)


def require_policy(policy: Policy) -> Callable[..., Principal]:
    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not evaluate(principal, policy):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{policy.value} policy required",
            )
        return principal

    return dependency


require_admin = require_policy(Policy.ADMIN)
require_supplier_admin = require_policy(Policy.SUPPLIER_ADMIN)
require_supplier = require_policy(Policy.SUPPLIER)
