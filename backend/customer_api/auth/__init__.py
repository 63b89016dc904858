"""
Customer API — Authentication & Authorization Package
======================================================

What:  Bearer token validation and per-route authorization policies.
How:   tokens.py decodes/mints JWTs, models.py holds the Principal built from
       a validated token, policies.py is the policy table, and
       dependencies.py exposes them to FastAPI routes.

Usage:
    from customer_api.auth import authorize, Principal

    @router.delete("/customers/{customer_id}")
    async def delete_customer(principal: Principal = Depends(authorize("DeleteUser"))):
        ...
"""

from customer_api.auth.dependencies import authorize, bearer_scheme, get_current_principal
from customer_api.auth.models import Principal
from customer_api.auth.policies import POLICIES, Policy, get_policy
from customer_api.auth.tokens import create_access_token, decode_access_token

__all__ = [
    "authorize",
    "bearer_scheme",
    "get_current_principal",
    "Principal",
    "POLICIES",
    "Policy",
    "get_policy",
    "create_access_token",
    "decode_access_token",
]
