import logging

from fastapi import Depends, Request

from errors import AdminRequired, InvalidOrExpiredToken, MissingToken
from models import Role
from utils.jwt import verify_jwt

logger = logging.getLogger(__name__)


class Identity:
    """Verified caller taken from the session token"""

    def __init__(self, user_id: int, role: Role):
        self.user_id = user_id
        self.role = role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self):
        return f"Identity(user_id={self.user_id}, role={self.role.value})"


async def require_user(request: Request) -> Identity:
    """
    Verify the session cookie

    Args:
        request: FastAPI request object

    Returns:
        Identity carried by the token

    Raises:
        MissingToken: If no session cookie was sent
        InvalidOrExpiredToken: If the token is tampered with or expired
    """
    settings = request.app.state.settings
    token = request.cookies.get(settings.cookie_name)

    if not token:
        raise MissingToken()

    payload = verify_jwt(token, settings.jwt_secret)

    if not payload:
        logger.warning(f"Rejected session token on {request.method} {request.url.path}")
        raise InvalidOrExpiredToken()

    identity = Identity(payload["id"], Role(payload["role"]))

    # Attach user info to request state
    request.state.user_id = identity.user_id
    request.state.user_role = identity.role
    return identity


async def require_admin(identity: Identity = Depends(require_user)) -> Identity:
    """Admin gate, runs only after the session gate passed"""
    if not identity.is_admin:
        logger.warning(f"User {identity.user_id} denied admin access")
        raise AdminRequired()
    return identity
