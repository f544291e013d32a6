import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Enum, Integer, LargeBinary, String, Text

from northwind.core.database import Base
from northwind.core.roles import Role
from northwind.core.time_utils import ensure_utc


@dataclass(frozen=True)
class RefreshToken:
    value: Optional[str] = None
    create_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    revoke_date: Optional[datetime] = None

    @property
    def is_revoked(self) -> bool:
        return self.revoke_date is not None and self.expiry_date is None


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    user_identifier = Column(
        String(36),
        unique=True,
        nullable=False,
        default=lambda: str(uuid.uuid4()),
    )
    username = Column(String, unique=True, index=True, nullable=False)

    password_salt = Column(LargeBinary(64), nullable=False, default=b"")
    password_hash = Column(LargeBinary(32), nullable=False, default=b"")

    role = Column(Enum(Role, native_enum=False, length=20), nullable=False, default=Role.CUSTOMER)

    access_token = Column(Text, nullable=True)

    # the user's single refresh token lives on the same row
    refresh_token_value = Column(String(64), nullable=True, index=True)
    refresh_token_create_date = Column(DateTime(timezone=True), nullable=True)
    refresh_token_expiry_date = Column(DateTime(timezone=True), nullable=True)
    refresh_token_revoke_date = Column(DateTime(timezone=True), nullable=True)

    @property
    def refresh_token(self) -> Optional[RefreshToken]:
        token = RefreshToken(
            value=self.refresh_token_value,
            create_date=ensure_utc(self.refresh_token_create_date),
            expiry_date=ensure_utc(self.refresh_token_expiry_date),
            revoke_date=ensure_utc(self.refresh_token_revoke_date),
        )
        if token == RefreshToken():
            return None
        return token

    @refresh_token.setter
    def refresh_token(self, token: Optional[RefreshToken]) -> None:
        token = token or RefreshToken()
        self.refresh_token_value = token.value
        self.refresh_token_create_date = token.create_date
        self.refresh_token_expiry_date = token.expiry_date
        self.refresh_token_revoke_date = token.revoke_date
