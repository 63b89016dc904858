"""
Customer API — Authentication Models
=====================================

What:  The Principal: who the caller is, as asserted by a validated bearer token.
Why:   Policies evaluate against a small immutable object instead of a raw
       JWT payload dict.
"""

from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, Field

# Claims that carry role names; either may be a single string or a list
ROLE_CLAIMS = ("role", "roles")


def claim_values(value: Any) -> List[str]:
    """
    Normalise a claim value into the list of strings it asserts.

    JSON booleans become "true"/"false" so that a token carrying
    `"can_delete_user": true` satisfies a check for the string "true".
    """
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple)) else [value]
    normalised = []
    for item in items:
        if isinstance(item, bool):
            normalised.append("true" if item else "false")
        else:
            normalised.append(str(item))
    return normalised


class Principal(BaseModel):
    """
    Authenticated caller extracted from a JWT.

    Attributes:
        subject: The `sub` claim, when the token has one
        roles:   Role names gathered from the `role` and `roles` claims
        claims:  The full decoded payload, for claim-based policies
    """
    subject: Optional[str] = None
    roles: FrozenSet[str] = Field(default_factory=frozenset)
    claims: Dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def from_claims(cls, payload: Dict[str, Any]) -> "Principal":
        roles: set = set()
        for claim in ROLE_CLAIMS:
            roles.update(claim_values(payload.get(claim)))
        subject = payload.get("sub")
        return cls(
            subject=str(subject) if subject is not None else None,
            roles=frozenset(roles),
            claims=dict(payload),
        )

    def is_in_role(self, role: str) -> bool:
        return role in self.roles

    def has_claim(self, name: str, allowed: Iterable[str] = ()) -> bool:
        """
        True when the claim is present and, if `allowed` is given, one of its
        values is in `allowed`. Comparison is exact and case-sensitive.
        """
        if name not in self.claims:
            return False
        allowed = tuple(allowed)
        if not allowed:
            return True
        return any(value in allowed for value in claim_values(self.claims[name]))
