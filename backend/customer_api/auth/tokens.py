"""
Customer API — JWT Encoding & Validation
=========================================

What:  Decodes bearer tokens presented by callers and mints tokens for tests
       and local tooling.
How:   python-jose with the symmetric key and algorithm from settings.
       Audience and issuer are checked only when configured.

Failure modes (all raise AuthenticationError → 401):
    - validation key not configured
    - bad signature or malformed token
    - expired token (`exp` in the past) or token without `exp`
    - audience / issuer mismatch
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from customer_api.config import Settings, settings
from customer_api.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def decode_access_token(token: str, config: Settings = settings) -> Dict[str, Any]:
    """
    Verify a JWT and return its payload.

    Args:
        token:  Raw token string (without the "Bearer " prefix)
        config: Settings providing key, algorithm, audience and issuer

    Raises:
        AuthenticationError: token cannot be trusted for any reason
    """
    if not config.jwt_secret_key:
        logger.error("JWT_SECRET_KEY is not configured; rejecting bearer token")
        raise AuthenticationError("Token validation is not configured")

    try:
        return jwt.decode(
            token,
            config.jwt_secret_key,
            algorithms=[config.jwt_algorithm],
            audience=config.jwt_audience,
            issuer=config.jwt_issuer,
            options={
                "verify_aud": config.jwt_audience is not None,
                "require_exp": True,
                "require_aud": config.jwt_audience is not None,
                "require_iss": config.jwt_issuer is not None,
            },
        )
    except ExpiredSignatureError:
        logger.info("Rejected expired bearer token")
        raise AuthenticationError("Token has expired")
    except JWTError as e:
        logger.info("Rejected bearer token: %s", str(e))
        raise AuthenticationError("Invalid token", context={"reason": str(e)})


def create_access_token(
    subject: str,
    roles: Iterable[str] = (),
    claims: Optional[Dict[str, Any]] = None,
    expires_in: Optional[timedelta] = None,
    config: Settings = settings,
) -> str:
    """
    Mint a signed JWT accepted by decode_access_token.

    Args:
        subject:    Value of the `sub` claim
        roles:      Role names, written to the `role` claim
        claims:     Extra claims merged into the payload (e.g. can_delete_user)
        expires_in: Token lifetime; negative values produce an expired token.
                    Defaults to settings.jwt_expire_minutes.
    """
    now = datetime.now(timezone.utc)
    if expires_in is None:
        expires_in = timedelta(minutes=config.jwt_expire_minutes)

    payload: Dict[str, Any] = {"sub": subject, "iat": now, "exp": now + expires_in}
    roles = list(roles)
    if roles:
        payload["role"] = roles
    if config.jwt_audience:
        payload["aud"] = config.jwt_audience
    if config.jwt_issuer:
        payload["iss"] = config.jwt_issuer
    if claims:
        payload.update(claims)

    return jwt.encode(payload, config.jwt_secret_key, algorithm=config.jwt_algorithm)
