"""User directory: maps identity provider subjects to internal users."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from debt_tracker.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for user lookups."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def find_user_by_identity(self, identity: str) -> Optional[User]:
        """
        Get the internal user for an external identity.

        Args:
            identity: Subject identifier from the identity provider

        Returns:
            User if registered, None otherwise
        """
        return self.db.execute(
            select(User).where(User.external_id == identity)
        ).scalar_one_or_none()

    def register_user(
        self, identity: str, name: Optional[str] = None, email: Optional[str] = None
    ) -> User:
        """Create the internal record for a newly signed up identity.

        Returns the existing user when the identity is already registered.
        """
        user = self.find_user_by_identity(identity)
        if user is not None:
            return user

        user = User(external_id=identity, name=name, email=email)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("Registered user id=%s for identity %s", user.id, identity)
        return user


__all__ = ["UserService"]
