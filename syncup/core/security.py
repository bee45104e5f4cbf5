# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Session tokens — signed HS256 JWTs carrying the member and group ids.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError
from jose import jwt as jose_jwt

from syncup.core.config import settings
from syncup.core.logging import get_logger
from syncup.models.domain import Group, Member

logger = get_logger(__name__)


def create_session_token(
    member: Member,
    group: Group,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a session token for a member of a group.

    Args:
        member: The authenticated member
        group: The member's group
        expires_delta: Token lifetime (default SESSION_TTL_HOURS)
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(hours=settings.SESSION_TTL_HOURS)
    )
    payload: dict[str, Any] = {
        "sub": member.id,
        "group_id": group.id,
        "name": member.name,
        "is_admin": member.is_admin,
        "exp": expire,
    }
    return jose_jwt.encode(
        payload, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM
    )


def decode_session_token(token: str) -> Optional[dict[str, Any]]:
    """
    Verify and decode a session token.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        payload = jose_jwt.decode(
            token, settings.SESSION_SECRET, algorithms=[settings.SESSION_ALGORITHM]
        )
    except JWTError as e:
        logger.warning("Session token rejected: %s", e)
        return None
    if "sub" not in payload or "group_id" not in payload:
        logger.warning("Session token missing sub/group_id claims")
        return None
    return payload
