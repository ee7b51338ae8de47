"""HTTP transport for signed and public Upbit calls."""

import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from pydantic import TypeAdapter, ValidationError

from .base import DecodeError, SigningError, TransportError
from .encoding import ParamsLike, encode_params
from .signer import RequestSigner

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

# Methods whose parameters travel in the query string
QUERY_METHODS = ("GET", "DELETE")


@lru_cache(maxsize=None)
def _type_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class HttpTransport:
    """Issues one HTTP round trip per call. No retries."""

    def __init__(
        self,
        base_url: str,
        signer: Optional[RequestSigner] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize transport.

        Args:
            base_url: API root, e.g. https://api.upbit.com/v1/
            signer: Signer for authenticated calls
            timeout: Per-call timeout in seconds
            session: Optional requests session for testing
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.signer = signer
        self.timeout = timeout
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        endpoint: str,
        params: ParamsLike = None,
        result_type: Any = None,
    ) -> Any:
        """Perform an authenticated call.

        GET/DELETE send parameters as a percent-encoded query string, other
        methods send them as a JSON object body. The query hash in the token
        is computed over the raw values, not the percent-encoded ones.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL
            params: Request parameter record
            result_type: Type to decode the body into; None skips decoding

        Returns:
            Decoded result, or None when result_type is None

        Raises:
            SigningError: If the token cannot be signed
            TransportError: On network failure, timeout or non-2xx status
            DecodeError: If the body does not match result_type
        """
        if self.signer is None:
            raise SigningError(f"No signer configured for authenticated call to {endpoint}")

        method = method.upper()
        param_map = encode_params(params)
        url = self._build_url(endpoint)
        body = None

        if method in QUERY_METHODS:
            url = self._with_query(url, param_map)
        elif params is not None:
            # Same key order as the canonical query the token hash covers
            body = json.dumps(param_map, sort_keys=True)

        headers = {
            "Content-Type": "application/json",
            "Authorization": self.signer.authorization_header(param_map),
        }
        return self._send(method, url, endpoint, headers, body, result_type)

    def public_request(
        self,
        endpoint: str,
        params: ParamsLike = None,
        result_type: Any = None,
    ) -> Any:
        """Perform an unauthenticated GET (quotation endpoints)."""
        url = self._with_query(self._build_url(endpoint), encode_params(params))
        headers = {"Content-Type": "application/json"}
        return self._send("GET", url, endpoint, headers, None, result_type)

    def _build_url(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")

    @staticmethod
    def _with_query(url: str, param_map: Dict[str, str]) -> str:
        if not param_map:
            return url
        return f"{url}?{urlencode(sorted(param_map.items()))}"

    def _send(
        self,
        method: str,
        url: str,
        endpoint: str,
        headers: Dict[str, str],
        body: Optional[str],
        result_type: Any,
    ) -> Any:
        logger.debug(f"{method} {endpoint} auth={'Authorization' in headers}")
        try:
            response = self.session.request(
                method, url, data=body, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"{method} {endpoint} timed out after {self.timeout}s")
            raise TransportError(f"Request to {endpoint} timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {endpoint} failed: {e}")
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        text = response.text
        if response.status_code < 200 or response.status_code >= 300:
            logger.warning(f"{method} {endpoint} returned {response.status_code}")
            raise TransportError(
                f"API error status: {response.status_code}, body: {text}",
                status_code=response.status_code,
                body=text,
            )

        if result_type is None:
            return None

        try:
            return _type_adapter(result_type).validate_json(text)
        except ValidationError as e:
            logger.error(f"Failed to decode {endpoint} response: {e}")
            raise DecodeError(str(e), text) from e
