"""Stateless token authentication against the users table."""

import re
from typing import Any, Optional

from src.models.user import User
from src.models.operation_inputs import is_blank
from src.services.supabase_client import find_user_by_credentials
from src.utils.errors import AdminRequired, AuthenticationRequired, InvalidAuthentication
from src.utils.logging import get_structured_logger, mask_token

logger = get_structured_logger(__name__)


def parse_id(value: Any) -> Optional[int]:
    """
    Parse an integer id from a JSON value.

    Accepts ints and decimal strings; anything else (bools, floats,
    non-numeric text) yields None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if re.fullmatch(r"-?[0-9]+", text):
            return int(text)
    return None


async def authenticate_user(user_id: Any, token: Any) -> Optional[User]:
    """
    Look up the user matching both id and token exactly.

    Returns the user on success, None when the credentials are absent,
    malformed, or match no stored user. Storage errors propagate.
    """
    if is_blank(user_id) or is_blank(token) or not isinstance(token, str):
        return None

    parsed_id = parse_id(user_id)
    if parsed_id is None:
        logger.info("Rejected malformed user id", token=mask_token(token))
        return None

    record = await find_user_by_credentials(parsed_id, token)
    if record is None:
        logger.info("Authentication failed", user_id=parsed_id, token=mask_token(token))
        return None

    return User(id=record["id"], role=record.get("role") or "user")


async def require_user(user_id: Any, token: Any) -> User:
    """Authenticate or raise the matching 401 error."""
    if is_blank(user_id) or is_blank(token):
        raise AuthenticationRequired()

    user = await authenticate_user(user_id, token)
    if user is None:
        raise InvalidAuthentication()
    return user


def require_admin(user: User) -> User:
    if not user.is_admin:
        logger.warning("Non-admin attempted admin operation", user_id=user.id, role=user.role)
        raise AdminRequired()
    return user
