"""
NoteVault Backend — Credential Hasher & Token Issuer Tests
==========================================================

What:  Tests for BcryptPasswordHasher and JWTTokenIssuer.
How:   Real bcrypt (work factor 4) and real JWTs; time is injected for expiry.

What we test:
    ✅ Hashes are salted and verify only the original password
    ✅ Corrupt stored hashes verify as False instead of raising
    ✅ Tokens round-trip subject and email, expire on time
    ✅ Tampered tokens and foreign secrets are rejected with AuthError (401)
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from notevault.exceptions import AuthError
from notevault.services.password_hasher import BcryptPasswordHasher
from notevault.services.token_service import JWTTokenIssuer


class TestBcryptPasswordHasher:
    """Tests for one-way password hashing."""

    def test_hash_is_not_plaintext(self, hasher):
        hashed = hasher.hash("foobaz")
        assert hashed != "foobaz"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self, hasher):
        """Each hash gets its own salt."""
        assert hasher.hash("foobaz") != hasher.hash("foobaz")

    def test_verify_correct_password(self, hasher):
        hashed = hasher.hash("foobaz")
        assert hasher.verify("foobaz", hashed) is True

    def test_verify_wrong_password(self, hasher):
        hashed = hasher.hash("foobaz")
        assert hasher.verify("bazfoo", hashed) is False

    def test_verify_corrupt_hash_returns_false(self, hasher):
        assert hasher.verify("foobaz", "not-a-bcrypt-hash") is False

    def test_rounds_are_encoded_in_hash(self):
        hashed = BcryptPasswordHasher(rounds=5).hash("foobaz")
        assert hashed.split("$")[2] == "05"

    def test_long_passwords_are_supported(self, hasher):
        """Passwords beyond bcrypt's 72-byte input are hashed and verified consistently."""
        long_password = "x" * 100
        hashed = hasher.hash(long_password)
        assert hasher.verify(long_password, hashed) is True


class TestJWTTokenIssuer:
    """Tests for token issue/verify."""

    def test_issue_and_verify_round_trip(self, tokens):
        token = tokens.issue(42, "foo@baz.com")
        claims = tokens.verify(token)

        assert claims.user_id == 42
        assert claims.email == "foo@baz.com"

    def test_subject_is_string_claim(self, tokens):
        token = tokens.issue(7, "foo@baz.com")
        payload = jwt.get_unverified_claims(token)
        assert payload["sub"] == "7"
        assert payload["email"] == "foo@baz.com"

    def test_expiry_uses_configured_lifetime(self):
        fixed_now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        issuer = JWTTokenIssuer(secret="s" * 32, lifetime_seconds=600, clock=lambda: fixed_now)

        payload = jwt.get_unverified_claims(issuer.issue(1, "foo@baz.com"))

        assert payload["exp"] - payload["iat"] == 600

    def test_expired_token_rejected(self):
        issued_at = datetime.now(timezone.utc) - timedelta(hours=2)
        issuer = JWTTokenIssuer(secret="s" * 32, lifetime_seconds=60, clock=lambda: issued_at)
        token = issuer.issue(1, "foo@baz.com")

        with pytest.raises(AuthError) as exc_info:
            issuer.verify(token)
        assert exc_info.value.status_code == 401
        assert exc_info.value.context["reason"] == "expired"

    def test_token_signed_with_other_secret_rejected(self, tokens):
        other = JWTTokenIssuer(secret="another-secret-entirely-0123456789", lifetime_seconds=900)
        token = other.issue(1, "foo@baz.com")

        with pytest.raises(AuthError):
            tokens.verify(token)

    def test_tampered_token_rejected(self, tokens):
        """Swapping in another user's payload invalidates the signature."""
        header, _, signature = tokens.issue(1, "foo@baz.com").split(".")
        _, other_payload, _ = tokens.issue(2, "bar@baz.com").split(".")
        tampered = ".".join([header, other_payload, signature])

        with pytest.raises(AuthError):
            tokens.verify(tampered)

    def test_garbage_token_rejected(self, tokens):
        with pytest.raises(AuthError) as exc_info:
            tokens.verify("not.a.jwt")
        assert exc_info.value.message == "Could not validate credentials"

    def test_non_numeric_subject_rejected(self):
        secret = "s" * 32
        issuer = JWTTokenIssuer(secret=secret, lifetime_seconds=900)
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"sub": "alice", "email": "foo@baz.com", "exp": exp}, secret, algorithm="HS256")

        with pytest.raises(AuthError) as exc_info:
            issuer.verify(token)
        assert exc_info.value.context["reason"] == "malformed_claims"

    def test_missing_email_claim_rejected(self):
        secret = "s" * 32
        issuer = JWTTokenIssuer(secret=secret, lifetime_seconds=900)
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"sub": "1", "exp": exp}, secret, algorithm="HS256")

        with pytest.raises(AuthError):
            issuer.verify(token)
