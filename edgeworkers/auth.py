"""
EdgeGrid Authentication

Signs outgoing requests with the EG1-HMAC-SHA256 scheme.
"""

import base64
import hashlib
import hmac
import re
import uuid
from collections.abc import Callable, Generator
from datetime import datetime, timezone

import httpx
import structlog

from .config import EdgeGridConfig

logger = structlog.get_logger()

AUTH_SCHEME = "EG1-HMAC-SHA256"
TIMESTAMP_FORMAT = "%Y%m%dT%H:%M:%S+0000"

_WHITESPACE = re.compile(r"\s+")


def make_timestamp() -> str:
    """Current UTC time in EdgeGrid format"""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def make_nonce() -> str:
    return str(uuid.uuid4())


def _hmac_b64(key: bytes, data: bytes) -> str:
    return base64.b64encode(hmac.new(key, data, hashlib.sha256).digest()).decode()


class EdgeGridAuth(httpx.Auth):
    """
    httpx auth flow for EdgeGrid

    Example:
        >>> auth = EdgeGridAuth(EdgeGridConfig.from_edgerc())
        >>> async with httpx.AsyncClient(auth=auth) as client:
        ...     await client.get("https://host/edgeworkers/v1/contracts")
    """

    requires_request_body = True

    def __init__(
        self,
        config: EdgeGridConfig,
        timestamp: Callable[[], str] = make_timestamp,
        nonce: Callable[[], str] = make_nonce,
    ):
        self.config = config
        self._timestamp = timestamp
        self._nonce = nonce

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.authorization(request)
        yield request

    def authorization(self, request: httpx.Request) -> str:
        """Build the Authorization header value for a request"""
        timestamp = self._timestamp()
        unsigned = (
            f"{AUTH_SCHEME} "
            f"client_token={self.config.client_token};"
            f"access_token={self.config.access_token};"
            f"timestamp={timestamp};"
            f"nonce={self._nonce()};"
        )
        signing_key = _hmac_b64(self.config.client_secret.encode(), timestamp.encode())
        data = self.signing_data(request, unsigned)
        signature = _hmac_b64(signing_key.encode(), data.encode())

        logger.debug("edgegrid_request_signed", method=request.method, path=request.url.path)
        return f"{unsigned}signature={signature}"

    def signing_data(self, request: httpx.Request, auth_header: str) -> str:
        """Tab separated string the signature is computed over"""
        return "\t".join(
            [
                request.method.upper(),
                request.url.scheme,
                request.url.netloc.decode(),
                request.url.raw_path.decode(),
                self.canonical_headers(request),
                self.content_hash(request),
                auth_header,
            ]
        )

    def canonical_headers(self, request: httpx.Request) -> str:
        parts = []
        for name in self.config.headers_to_sign:
            value = request.headers.get(name)
            if value is None:
                continue
            parts.append(f"{name.lower()}:{_WHITESPACE.sub(' ', value.strip()).lower()}")
        return "\t".join(parts)

    def content_hash(self, request: httpx.Request) -> str:
        """Hash of the first max_body bytes, POST requests only"""
        if request.method.upper() != "POST":
            return ""
        body = request.content
        if not body:
            return ""
        if len(body) > self.config.max_body:
            logger.debug(
                "edgegrid_body_truncated",
                size=len(body),
                max_body=self.config.max_body,
            )
            body = body[: self.config.max_body]
        return base64.b64encode(hashlib.sha256(body).digest()).decode()
