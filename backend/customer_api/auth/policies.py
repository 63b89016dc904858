"""
Customer API — Authorization Policy Table
==========================================

What:  Named authorization rules evaluated against an authenticated Principal.
How:   Each Policy is a name plus a predicate. POLICIES is the single table
       that routes refer to by name (see routes/customers.py ROUTE_POLICIES).

Policies:
    Authenticated → any authenticated principal
    Admin         → role "Admin"
    DeleteUser    → claim can_delete_user == "true"
"""

from dataclasses import dataclass
from typing import Callable, Dict

from customer_api.auth.models import Principal


@dataclass(frozen=True)
class Policy:
    """A named predicate over a principal."""

    name: str
    predicate: Callable[[Principal], bool]

    def evaluate(self, principal: Principal) -> bool:
        return bool(self.predicate(principal))


def require_authenticated(name: str) -> Policy:
    return Policy(name=name, predicate=lambda principal: True)


def require_role(name: str, role: str) -> Policy:
    return Policy(name=name, predicate=lambda principal: principal.is_in_role(role))


def require_claim(name: str, claim: str, *allowed_values: str) -> Policy:
    return Policy(
        name=name,
        predicate=lambda principal: principal.has_claim(claim, allowed_values),
    )


POLICIES: Dict[str, Policy] = {
    policy.name: policy
    for policy in (
        require_authenticated("Authenticated"),
        require_role("Admin", "Admin"),
        require_claim("DeleteUser", "can_delete_user", "true"),
    )
}


def get_policy(name: str) -> Policy:
    """Look up a policy by name; unknown names are a wiring bug."""
    try:
        return POLICIES[name]
    except KeyError:
        raise KeyError(f"Unknown authorization policy '{name}'") from None
