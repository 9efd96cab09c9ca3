"""
EdgeWorkers Session

Signed HTTP transport shared by every resource operation.
"""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from .auth import EdgeGridAuth
from .config import EdgeGridConfig, Settings, get_settings
from .core.exceptions import APIError, ProblemDetails, RequestFailedError

logger = structlog.get_logger()

UNMARSHAL_ERROR_TITLE = (
    "Failed to unmarshal error body. EdgeWorkers API failed. Check details for more information."
)


class Session:
    """
    One httpx.AsyncClient signed with EdgeGrid credentials

    Example:
        >>> async with Session(EdgeGridConfig.from_edgerc()) as session:
        ...     response = await session.exec("listing contracts", "GET", "/edgeworkers/v1/contracts")
    """

    def __init__(
        self,
        config: EdgeGridConfig,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: EdgeGrid credentials
            settings: Client settings, defaults to get_settings()
            transport: Replaces the network transport (tests, proxies)
        """
        self.config = config
        self.settings = settings or get_settings()

        if transport is None:
            transport = httpx.AsyncHTTPTransport(retries=self.settings.max_retries)

        self._client = httpx.AsyncClient(
            base_url=f"https://{config.host.rstrip('/')}",
            auth=EdgeGridAuth(config),
            headers={"User-Agent": self.settings.user_agent},
            timeout=self.settings.timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client"""
        await self._client.aclose()

    async def __aenter__(self) -> "Session":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def exec(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Issue exactly one request

        Raises:
            RequestFailedError: no response was obtained
        """
        if self.config.account_key:
            params = {**(params or {}), "accountSwitchKey": self.config.account_key}

        try:
            return await self._client.request(
                method,
                path,
                params=params or None,
                json=json,
                content=content,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning("edgeworkers_request_failed", operation=operation, path=path, error=str(e))
            raise RequestFailedError(f"request failed: {e}", operation) from e

    def error(self, response: httpx.Response, operation: str | None = None) -> APIError:
        """Decode a problem-details body, falling back to the raw content"""
        try:
            problem = ProblemDetails.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                "edgeworkers_error_body_unmarshal_failed",
                status=response.status_code,
                error=str(e),
            )
            problem = ProblemDetails(
                title=UNMARSHAL_ERROR_TITLE,
                detail=response.text,
                status=response.status_code,
            )
        else:
            if "status" not in problem.model_fields_set:
                problem.status = response.status_code

        return APIError(problem, operation=operation)
