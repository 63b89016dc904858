"""
Customer API — FastAPI Auth Dependencies
=========================================

What:  Dependencies that authenticate the caller and enforce a named policy.
Why:   Routes declare their requirement once (`Depends(authorize("Admin"))`);
       rejection happens before the handler body runs.

Status codes:
    401 — no bearer token, or token failed validation (AuthenticationError)
    403 — token valid, policy predicate returned False (AuthorizationError)
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from customer_api.auth.models import Principal
from customer_api.auth.policies import get_policy
from customer_api.auth.tokens import decode_access_token
from customer_api.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must produce our 401, not FastAPI's default
bearer_scheme = HTTPBearer(
    scheme_name="Bearer",
    bearerFormat="JWT",
    description=(
        "JWT Authorization header using the Bearer scheme. "
        "Send 'Authorization: Bearer <token>'."
    ),
    auto_error=False,
)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """
    Extract and validate the caller from the Authorization header.

    Raises:
        AuthenticationError: header missing, not Bearer, or token invalid/expired
    """
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    payload = decode_access_token(credentials.credentials)
    principal = Principal.from_claims(payload)
    logger.debug("Authenticated principal: %s", principal.subject)
    return principal


def authorize(policy_name: str) -> Callable[..., Awaitable[Principal]]:
    """
    Build a dependency that requires `policy_name` to hold for the caller.

    The policy is resolved here, when the router is built, so a misspelled
    policy name fails at import time rather than on the first request.
    """
    policy = get_policy(policy_name)

    async def enforce_policy(
        principal: Principal = Depends(get_current_principal),
    ) -> Principal:
        if not policy.evaluate(principal):
            logger.warning(
                "Policy '%s' denied principal %s", policy.name, principal.subject
            )
            raise AuthorizationError(policy=policy.name)
        return principal

    return enforce_policy
