"""Unit tests for permit token signing."""

import pytest

from app.core.exceptions import InvalidSignatureError
from app.core.security import PermitTokenSigner


@pytest.fixture
def signer():
    return PermitTokenSigner("test-secret")


class TestPermitTokenSigner:
    def test_sign_and_verify(self, signer):
        token = signer.sign({"sub": "permit-1", "request_id": "req-1"})

        claims = signer.verify(token)

        assert claims["sub"] == "permit-1"
        assert claims["request_id"] == "req-1"
        assert "iat" in claims
        assert "exp" not in claims

    def test_other_secret_rejected(self, signer):
        token = PermitTokenSigner("someone-else").sign({"sub": "permit-1"})

        with pytest.raises(InvalidSignatureError) as exc_info:
            signer.verify(token)
        assert exc_info.value.status_code == 401

    def test_tampered_token_rejected(self, signer):
        token = signer.sign({"sub": "permit-1"})
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[:-2] + ("AA" if signature[-2:] != "AA" else "BB")])

        assert signer.is_authentic(tampered) is False

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
    def test_malformed_tokens(self, signer, token):
        with pytest.raises(InvalidSignatureError):
            signer.verify(token)
