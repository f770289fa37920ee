"""Caller resolution for ledger operations.

The identity provider authenticates the request; this module only turns the
identity it supplies into an internal User:
- Identity extraction from request headers
- User resolution via the user directory
"""

import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from debt_tracker.models.user import User
from debt_tracker.services.errors import NotFoundError, UnauthorizedError
from debt_tracker.services.user_service import UserService

logger = logging.getLogger(__name__)

IdentityResolver = Callable[[], Optional[str]]


def extract_identity(
    authorization: Optional[str] = None,
    x_user_identity: Optional[str] = None,
) -> Optional[str]:
    """Extract the caller identity from request headers.

    Priority:
    1) Authorization: "Bearer <identity>"
    2) X-User-Identity header

    Args:
        authorization: Authorization header
        x_user_identity: X-User-Identity header

    Returns:
        Identity string or None if not present
    """
    if authorization:
        auth = authorization.strip()
        if auth.lower().startswith("bearer "):
            token = auth[7:].strip()
            if token:
                return token

    if x_user_identity and x_user_identity.strip():
        return x_user_identity.strip()

    return None


def resolve_caller(db: Session, resolve_caller_identity: IdentityResolver) -> User:
    """Resolve the internal user making the current call.

    Args:
        db: Database session
        resolve_caller_identity: Capability returning the caller identity or None

    Returns:
        The caller's User record

    Raises:
        UnauthorizedError: No identity present
        NotFoundError: Identity has no internal user record
    """
    identity = resolve_caller_identity()
    if not identity:
        logger.warning("No caller identity provided")
        raise UnauthorizedError()

    user = UserService(db).find_user_by_identity(identity)
    if user is None:
        logger.warning("No user record for identity %s", identity)
        raise NotFoundError("User not found")

    return user


__all__ = ["IdentityResolver", "extract_identity", "resolve_caller"]
