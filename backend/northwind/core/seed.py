import logging

from sqlalchemy.orm import Session

from northwind.core.config import Settings
from northwind.core.roles import Role
from northwind.models import User
from northwind.services.user_service import UserService

logger = logging.getLogger(__name__)


def seed_admin_if_empty(db: Session, settings: Settings) -> bool:
    """Creates the bootstrap Admin when no user exists and a password is configured."""
    if not settings.ADMIN_PASSWORD:
        return False

    existing = db.query(User).count()
    if existing > 0:
        return False

    users = UserService(db)
    users.add(User(username=settings.ADMIN_USERNAME, role=Role.ADMIN), settings.ADMIN_PASSWORD)
    saved = users.is_saved_to_db()
    if saved:
        logger.info("Seeded admin user: %s", settings.ADMIN_USERNAME)
    return saved
