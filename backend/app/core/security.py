"""Signing and verification of permit QR payloads."""

import logging
from datetime import datetime, timezone
from typing import Any, Protocol

from jose import JWTError, jwt

from app.core.exceptions import InvalidSignatureError

logger = logging.getLogger(__name__)


class SignatureVerifier(Protocol):
    def verify(self, token: str) -> dict[str, Any]:
        ...


class PermitTokenSigner:
    """HMAC-signed JWTs carrying permit claims.

    Tokens carry no ``exp`` claim: an expired permit must still verify as
    authentic so that its time window can be reported as a failed check.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def sign(self, claims: dict[str, Any]) -> str:
        payload = {**claims, "iat": int(datetime.now(timezone.utc).timestamp())}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode a token, raising InvalidSignatureError if it is not ours."""
        if not token:
            raise InvalidSignatureError("QR code data is required")
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"Rejected permit token: {e}")
            raise InvalidSignatureError() from e

    def is_authentic(self, token: str) -> bool:
        try:
            self.verify(token)
        except InvalidSignatureError:
            return False
        return True
