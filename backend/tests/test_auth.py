"""
Customer API — Authentication & Policy Unit Tests
==================================================

What:  Tests for JWT decoding, Principal construction and the policy table.
How:   Tokens are minted with create_access_token; no HTTP involved.

What we test:
    ✅ Round trip of subject, roles and custom claims
    ✅ Expired / exp-less / wrongly signed / wrong-audience tokens raise AuthenticationError
    ✅ Role and claim normalisation (string, list, JSON boolean)
    ✅ Admin and DeleteUser policies, unknown policy names
"""

from datetime import timedelta

import pytest
from jose import jwt

from customer_api.auth import POLICIES, Principal, create_access_token, decode_access_token, get_policy
from customer_api.auth.dependencies import authorize
from customer_api.config import Settings
from customer_api.exceptions import AuthenticationError


class TestTokens:
    """Tests for create_access_token / decode_access_token."""

    def test_round_trip_preserves_claims(self):
        token = create_access_token(
            subject="alice", roles=["Admin"], claims={"can_delete_user": "true"}
        )

        payload = decode_access_token(token)

        assert payload["sub"] == "alice"
        assert payload["role"] == ["Admin"]
        assert payload["can_delete_user"] == "true"

    def test_expired_token_rejected(self):
        token = create_access_token(subject="alice", expires_in=timedelta(minutes=-5))

        with pytest.raises(AuthenticationError, match="expired"):
            decode_access_token(token)

    def test_token_without_expiry_rejected(self):
        token = jwt.encode({"sub": "alice", "role": "Admin"}, "test-secret-not-real", "HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token)

    def test_wrong_signing_key_rejected(self):
        other = Settings(jwt_secret_key="some-other-key")
        token = create_access_token(subject="alice", config=other)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            decode_access_token(token)

    def test_garbage_token_rejected(self):
        with pytest.raises(AuthenticationError):
            decode_access_token("not-a-jwt")

    def test_audience_checked_when_configured(self):
        strict = Settings(jwt_secret_key="test-secret-not-real", jwt_audience="customers")
        token = create_access_token(subject="alice")  # no aud claim

        with pytest.raises(AuthenticationError):
            decode_access_token(token, config=strict)

        other_audience = Settings(jwt_secret_key="test-secret-not-real", jwt_audience="billing")
        with pytest.raises(AuthenticationError):
            decode_access_token(
                create_access_token(subject="alice", config=other_audience), config=strict
            )

        good = create_access_token(subject="alice", config=strict)
        assert decode_access_token(good, config=strict)["aud"] == "customers"

    def test_missing_secret_rejects_everything(self):
        token = create_access_token(subject="alice")
        unconfigured = Settings(jwt_secret_key="")

        with pytest.raises(AuthenticationError, match="not configured"):
            decode_access_token(token, config=unconfigured)


class TestPrincipal:
    """Tests for Principal.from_claims and claim matching."""

    def test_roles_from_string_and_list_claims(self):
        principal = Principal.from_claims({"sub": "a", "role": "Admin", "roles": ["Support"]})

        assert principal.roles == frozenset({"Admin", "Support"})
        assert principal.is_in_role("Admin")
        assert not principal.is_in_role("admin")  # case-sensitive

    def test_boolean_claim_matches_string_true(self):
        principal = Principal.from_claims({"can_delete_user": True})

        assert principal.has_claim("can_delete_user", ["true"])

    def test_claim_with_other_value_does_not_match(self):
        principal = Principal.from_claims({"can_delete_user": "false"})

        assert principal.has_claim("can_delete_user")
        assert not principal.has_claim("can_delete_user", ["true"])

    def test_missing_claim(self):
        principal = Principal.from_claims({"sub": "a"})

        assert not principal.has_claim("can_delete_user")
        assert principal.subject == "a"


class TestPolicies:
    """Tests for the policy table."""

    def test_policy_table_contents(self):
        assert set(POLICIES) == {"Authenticated", "Admin", "DeleteUser"}

    def test_authenticated_accepts_any_principal(self):
        assert get_policy("Authenticated").evaluate(Principal())

    def test_admin_policy(self):
        admin = get_policy("Admin")

        assert admin.evaluate(Principal.from_claims({"role": "Admin"}))
        assert not admin.evaluate(Principal.from_claims({"role": "User"}))

    def test_delete_user_policy(self):
        delete_user = get_policy("DeleteUser")

        assert delete_user.evaluate(Principal.from_claims({"can_delete_user": "true"}))
        assert not delete_user.evaluate(Principal.from_claims({"can_delete_user": "false"}))
        # An Admin role alone does not grant delete
        assert not delete_user.evaluate(Principal.from_claims({"role": "Admin"}))

    def test_unknown_policy_fails_at_wiring_time(self):
        with pytest.raises(KeyError, match="Unknown authorization policy"):
            authorize("SuperUser")
