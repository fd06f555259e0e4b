import logging
import uuid
from datetime import timedelta
from typing import Optional

from school_connect import models
from school_connect.config.settings import settings
from school_connect.database import InMemoryDB
from school_connect.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class EmailAlreadyRegistered(Exception):
    """Raised when registering an email that already has an account."""


def get_user_by_email(db: InMemoryDB, email: str) -> Optional[models.User]:
    return next((u for u in db.users if u.email == email), None)


def get_user_by_id(db: InMemoryDB, user_id: int) -> Optional[models.User]:
    return next((u for u in db.users if u.id == user_id), None)


class AuthService:
    """Service for credential checks and cookie sessions."""

    @staticmethod
    def authenticate(db: InMemoryDB, email: str, password: str) -> Optional[models.User]:
        """
        Local-strategy check: find the user by email and compare the password
        against the stored bcrypt hash.

        Returns:
            The user with `last_active` refreshed, or None on bad credentials.
        """
        user = get_user_by_email(db, email)
        if user is None or not verify_password(password, user.password):
            return None
        user.last_active = models.utcnow()
        return user

    @staticmethod
    def register(db: InMemoryDB, name: str, email: str, password: str, role: Optional[str]) -> models.User:
        if get_user_by_email(db, email) is not None:
            raise EmailAlreadyRegistered(email)

        user = models.User(
            id=db.next_id("users"),
            name=name,
            email=email,
            password=hash_password(password),
            role=role or "parent",
        )
        db.users.append(user)
        logger.info(f"Registered user {user.id} with role {user.role}")
        return user

    @staticmethod
    def create_session(db: InMemoryDB, user: models.User) -> models.Session:
        now = models.utcnow()
        session = models.Session(
            id=str(uuid.uuid4()),
            user_id=user.id,
            created_at=now,
            expires_at=now + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS),
        )
        db.sessions[session.id] = session
        return session

    @staticmethod
    def get_session_user(db: InMemoryDB, session_id: str) -> Optional[models.User]:
        """Resolve a session id to its user, evicting the session when it has expired."""
        session = db.sessions.get(session_id)
        if session is None:
            return None
        if session.expires_at <= models.utcnow():
            logger.info(f"Session for user {session.user_id} expired")
            db.sessions.pop(session_id, None)
            return None
        return get_user_by_id(db, session.user_id)

    @staticmethod
    def destroy_session(db: InMemoryDB, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        return db.sessions.pop(session_id, None) is not None


auth_service = AuthService()
