"""JWT token generation and validation

Bearer tokens are issued by the identity provider in front of the ops
backend; this module validates them and can mint tokens for scripts and
tests.

JWT Token Claims Structure:
===========================

- sub (Subject): User ID string (users.id)
- role: User's role ("admin" | "sales" | "designer" | "ops" | "manufacturer")
- email: User's email address
- iat (Issued At): Unix timestamp when token was created
- exp (Expiration): Unix timestamp when token expires (iat + JWT_EXPIRY_MINUTES)

Security Properties:
- Algorithm: HS256 (HMAC-SHA256 symmetric signing)
- Secret: JWT_SECRET setting
- Stateless validation; the user row is loaded separately by get_current_user
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional
import jwt

from config import get_settings


def _get_jwt_secret() -> str:
    """Get JWT_SECRET from settings.

    Raises:
        ValueError: If JWT_SECRET is empty
    """
    secret = get_settings().JWT_SECRET
    if not secret:
        raise ValueError("JWT_SECRET is not configured")
    return secret


def create_access_token(
    user_id: str,
    role: str,
    email: str,
    expires_minutes: Optional[int] = None
) -> str:
    """Create a signed JWT access token.

    Args:
        user_id: User's id
        role: User's role
        email: User's email address
        expires_minutes: Override for the configured lifetime

    Returns:
        str: Signed JWT token
    """
    settings = get_settings()
    if expires_minutes is None:
        expires_minutes = settings.JWT_EXPIRY_MINUTES

    now = datetime.now(timezone.utc)
    expiration = now + timedelta(minutes=expires_minutes)

    payload = {
        'sub': str(user_id),
        'role': role,
        'email': email,
        'iat': int(now.timestamp()),
        'exp': int(expiration.timestamp())
    }

    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and validate a JWT token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or tampered
    """
    return jwt.decode(
        token,
        _get_jwt_secret(),
        algorithms=[get_settings().JWT_ALGORITHM]
    )
