"""JWT token creation and verification.

Tokens are issued by the authentication service; this module only needs to
decode them to learn who is acting. Uses timesheet.core.config for secret and
algorithm.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from timesheet.core.config import get_settings

# Claims checked, in order, for the acting user's login.
ACTOR_CLAIMS = ("login", "loginId", "sub")
DEFAULT_TOKEN_TTL = timedelta(hours=8)


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token with the given claims.

    Args:
        data: Claims to encode (e.g. sub, loginId).
        expires_delta: Optional TTL; defaults to eight hours.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode = data.copy()
    to_encode["exp"] = datetime.now(UTC) + (expires_delta or DEFAULT_TOKEN_TTL)
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Raises:
        ValueError: If the secret is unset, or the token is invalid or expired.
    """
    settings = get_settings()
    secret = settings.secret_key.get_secret_value()
    if not secret:
        raise ValueError("SECRET_KEY is not configured")
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.algorithm],
            options={"require_exp": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    return payload


def actor_from_token(token: str) -> str | None:
    """Return the login carried by a valid token, or None when it cannot be trusted."""
    try:
        payload = verify_token(token)
    except ValueError:
        return None
    for claim in ACTOR_CLAIMS:
        value = payload.get(claim)
        if value is not None and str(value).strip():
            return str(value)
    return None
