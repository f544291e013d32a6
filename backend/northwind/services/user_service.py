import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from northwind.core.repository import Repository, user_by_username
from northwind.core.security import hash_password
from northwind.models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.users = Repository(db, User)

    def get_all(self) -> list[User]:
        logger.info("Retrieving all users")
        return self.users.find_all().order_by(User.id).all()

    def get_by_id(self, user_id: int) -> Optional[User]:
        logger.info("Retrieving user with id: %s", user_id)
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        logger.info("Retrieving user with username: %s", username)
        return user_by_username(self.users, username)

    def add(self, user: User, password: str) -> None:
        logger.info("Adding user with username: %s", user.username)

        user.password_salt, user.password_hash = hash_password(password)
        if not user.user_identifier:
            user.user_identifier = str(uuid.uuid4())

        self.users.add(user)

    def delete(self, user: User) -> None:
        logger.info("Deleting user with id: %s", user.id)
        self.users.delete(user)

    def is_saved_to_db(self) -> bool:
        return self.users.commit()
