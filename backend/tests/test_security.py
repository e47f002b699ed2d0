"""
Tests for bearer-token helpers.
"""

from fms.core.security import create_access_token, decode_access_token, principal_login


class TestTokens:

    def test_round_trip_keeps_claims(self):
        token = create_access_token({"sub": "alice"})
        payload = decode_access_token(token)
        assert payload is not None
        assert payload["sub"] == "alice"
        assert "exp" in payload

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "alice"}, expires_minutes=-5)
        assert decode_access_token(token) is None

    def test_garbage_token_is_rejected(self):
        assert decode_access_token("not-a-jwt") is None


class TestPrincipalLogin:

    def test_sub_claim_is_the_login(self):
        assert principal_login({"sub": "alice"}) == "alice"

    def test_gateway_user_name_claim_wins(self):
        assert principal_login({"sub": "42", "user_name": "alice"}) == "alice"

    def test_missing_or_blank_login_is_none(self):
        assert principal_login({}) is None
        assert principal_login({"sub": ""}) is None
        assert principal_login({"sub": 42}) is None
