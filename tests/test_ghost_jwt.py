"""Tests for the Ghost Admin JWT builder."""

import hashlib
import hmac
import json
from base64 import urlsafe_b64decode

import pytest

from ghost_admin.errors import DecodingError, MalformedCredentialError
from ghost_admin.ghost_jwt import build_ghost_jwt, split_admin_api_key

KEY = "abc123:68656c6c6f"  # hex of "hello"


def _pad_b64(s: str) -> str:
    """Re-add base64 padding stripped by JWT encoding."""
    return s + "=" * (-len(s) % 4)


def _decode(segment: str) -> dict:
    return json.loads(urlsafe_b64decode(_pad_b64(segment)))


def _verify(token: str, secret: bytes, now: float) -> dict:
    """Check signature, audience and expiry the way Ghost does."""
    header_b64, payload_b64, sig_b64 = token.split(".")
    expected = hmac.new(
        secret, f"{header_b64}.{payload_b64}".encode(), hashlib.sha256
    ).digest()
    assert hmac.compare_digest(expected, urlsafe_b64decode(_pad_b64(sig_b64)))
    claims = _decode(payload_b64)
    assert claims["aud"] == "/admin/"
    assert claims["iat"] <= now < claims["exp"]
    return claims


class TestBuildGhostJwt:
    def test_jwt_structure(self):
        token = build_ghost_jwt(KEY, clock=lambda: 1_700_000_000)  # allow-secret — test-generated JWT token
        parts = token.split(".")
        assert len(parts) == 3, "JWT must have 3 dot-separated parts"

        header = _decode(parts[0])
        assert header["alg"] == "HS256"
        assert header["typ"] == "JWT"
        assert header["kid"] == "abc123"

        payload = _decode(parts[1])
        assert payload["aud"] == "/admin/"
        assert payload["iat"] == 1_700_000_000
        assert payload["exp"] - payload["iat"] == 300

    def test_kid_not_in_claims(self):
        token = build_ghost_jwt(KEY)
        assert "kid" not in _decode(token.split(".")[1])

    def test_no_padding_in_segments(self):
        token = build_ghost_jwt(KEY)
        assert "=" not in token

    def test_fractional_clock_truncated(self):
        token = build_ghost_jwt(KEY, clock=lambda: 1_700_000_000.9)
        assert _decode(token.split(".")[1])["iat"] == 1_700_000_000

    def test_signature_verifies(self):
        token = build_ghost_jwt(KEY, clock=lambda: 1_700_000_000)
        _verify(token, b"hello", now=1_700_000_100)

    def test_tokens_one_second_apart(self):
        first = build_ghost_jwt(KEY, clock=lambda: 1_700_000_000)
        second = build_ghost_jwt(KEY, clock=lambda: 1_700_000_001)
        assert first != second
        _verify(first, b"hello", now=1_700_000_001)
        _verify(second, b"hello", now=1_700_000_001)

    def test_short_secret_is_accepted(self):
        token = build_ghost_jwt("id:00")
        assert len(token.split(".")) == 3

    def test_uses_system_clock_by_default(self, monkeypatch):
        monkeypatch.setattr("ghost_admin.ghost_jwt.time.time", lambda: 1234.0)
        token = build_ghost_jwt(KEY)
        assert _decode(token.split(".")[1])["iat"] == 1234


class TestInvalidKeys:
    @pytest.mark.parametrize(
        "key",
        ["no-colon-here", "a:b:c", ":68656c6c6f", "abc123:", "", ":", "a::b"],
    )
    def test_malformed_credential(self, key):
        with pytest.raises(MalformedCredentialError, match="id.*secret"):
            build_ghost_jwt(key)

    @pytest.mark.parametrize(
        "key",
        ["abc123:zz", "abc123:6865z6", "abc123:686", "abc123:68 65", "abc123:ünï"],
    )
    def test_bad_hex_secret(self, key):
        with pytest.raises(DecodingError):
            build_ghost_jwt(key)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            build_ghost_jwt("no-colon-here")
        with pytest.raises(ValueError):
            build_ghost_jwt("abc123:xyz0")

    def test_decoding_error_chains_cause(self):
        with pytest.raises(DecodingError) as exc_info:
            build_ghost_jwt("abc123:zz")
        assert exc_info.value.__cause__ is not None


class TestSplitAdminApiKey:
    def test_split(self):
        assert split_admin_api_key(KEY) == ("abc123", b"hello")

    def test_uppercase_hex(self):
        assert split_admin_api_key("k:DEADBEEF") == ("k", bytes.fromhex("deadbeef"))
