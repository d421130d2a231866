import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional

from models import Role

ALGORITHM = "HS256"


def create_jwt(user_id: int, role: Role, secret: str, expires_in: int = 3600) -> str:
    """
    Sign a session token for a user

    Args:
        user_id: Id of the authenticated user
        role: Role of the authenticated user
        secret: Signing secret
        expires_in: Lifetime in seconds

    Returns:
        Encoded JWT carrying id, role, iat and exp
    """
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "role": Role(role).value,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_jwt(token: str, secret: str) -> Optional[dict]:
    """
    Verify JWT token and return payload

    Args:
        token: JWT token string
        secret: Signing secret

    Returns:
        Decoded payload if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["exp", "id", "role"]},
        )
    except jwt.InvalidTokenError:
        return None

    if not isinstance(payload.get("id"), int) or payload.get("role") not in {r.value for r in Role}:
        return None

    return payload
