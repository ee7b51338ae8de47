"""JWT request signing for the Upbit exchange API."""

import hashlib
import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import jwt

from .base import SigningError
from .encoding import canonical_query

logger = logging.getLogger(__name__)

QUERY_HASH_ALG = "SHA512"


@dataclass(frozen=True)
class Credential:
    """Claim set authenticating exactly one request."""

    access_key: str
    nonce: str
    query_hash: Optional[str] = None
    query_hash_alg: Optional[str] = None

    def claims(self) -> Dict[str, str]:
        claims = {"access_key": self.access_key, "nonce": self.nonce}
        if self.query_hash is not None:
            claims["query_hash"] = self.query_hash
            claims["query_hash_alg"] = self.query_hash_alg
        return claims


def query_hash(params: Mapping[str, str]) -> str:
    """Hex SHA-512 of the canonical (unescaped) query string."""
    return hashlib.sha512(canonical_query(params).encode("utf-8")).hexdigest()


class RequestSigner:
    """Builds per-request bearer tokens from an access/secret key pair."""

    def __init__(self, access_key: str, secret_key: str):
        """Initialize signer.

        Args:
            access_key: Upbit access key, sent as a claim
            secret_key: Upbit secret key, used as the HS256 signing key
        """
        self.access_key = access_key
        self._secret_key = secret_key

    def build_credential(self, params: Optional[Mapping[str, str]] = None) -> Credential:
        """Create a fresh credential; the query hash is included only when params are non-empty."""
        nonce = str(uuid.uuid4())
        if not params:
            return Credential(access_key=self.access_key, nonce=nonce)
        return Credential(
            access_key=self.access_key,
            nonce=nonce,
            query_hash=query_hash(params),
            query_hash_alg=QUERY_HASH_ALG,
        )

    def generate_token(self, params: Optional[Mapping[str, str]] = None) -> str:
        """Sign a fresh credential for one request.

        Args:
            params: Encoded request parameters (see encode_params)

        Returns:
            Compact HS256 JWT

        Raises:
            SigningError: If the key material is missing or rejected
        """
        if not self._secret_key:
            raise SigningError("Cannot sign request: secret key is empty")

        credential = self.build_credential(params)
        try:
            return jwt.encode(credential.claims(), self._secret_key, algorithm="HS256")
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error(f"Failed to sign request token: {e}")
            raise SigningError(f"Failed to sign request token: {e}") from e

    def authorization_header(self, params: Optional[Mapping[str, str]] = None) -> str:
        return f"Bearer {self.generate_token(params)}"
