import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from northwind.core.config import Settings, get_settings
from northwind.core.repository import Repository, user_by_refresh_token, user_by_username
from northwind.core.security import (
    access_token_lifetime,
    create_access_token,
    generate_refresh_token,
    verify_password,
)
from northwind.core.time_utils import utcnow
from northwind.models import RefreshToken, User

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.users = Repository(db, User)
        self.settings = settings or get_settings()

    def get_by_credentials(self, username: str, password: str) -> Optional[User]:
        """
        None when the user is unknown or the password is wrong; callers cannot
        tell which.
        """
        logger.info("Retrieving user with username: %s", username)
        user = user_by_username(self.users, username)

        if user is None or not verify_password(password, user.password_salt, user.password_hash):
            return None
        return user

    def get_by_refresh_token(self, refresh_token: str) -> Optional[User]:
        # expiry is left to the caller so "unknown" and "expired" stay distinct
        logger.info("Retrieving user with refresh token")
        return user_by_refresh_token(self.users, refresh_token)

    def create_credentials(self, user: User) -> User:
        logger.info("Generating credentials for user: %s", user.username)
        return self._generate_tokens(user)

    def refresh_credentials(self, user: User) -> User:
        logger.info("Refreshing credentials for user: %s", user.username)
        return self._generate_tokens(user)

    def revoke_credentials(self, user: User) -> None:
        logger.info("Revoking credentials for user: %s", user.username)

        previous = user.refresh_token or RefreshToken()
        user.access_token = None
        user.refresh_token = RefreshToken(
            value=None,
            create_date=previous.create_date,
            expiry_date=None,
            revoke_date=utcnow(),
        )
        self.users.update(user)

    def is_saved_to_db(self) -> bool:
        return self.users.commit()

    def _generate_tokens(self, user: User, now: Optional[datetime] = None) -> User:
        now = now or utcnow()
        user.access_token = create_access_token(
            subject=user.user_identifier,
            role=user.role,
            settings=self.settings,
            now=now,
        )
        user.refresh_token = RefreshToken(
            value=generate_refresh_token(),
            create_date=now,
            expiry_date=now + 2 * access_token_lifetime(self.settings),
            revoke_date=None,
        )
        self.users.update(user)
        return user
