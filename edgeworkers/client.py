"""
EdgeWorkers HTTP Client

Python client for the EdgeWorkers and EdgeKV management APIs.
"""

from typing import Any

import httpx
import structlog

from .config import EdgeGridConfig, Settings, get_settings
from .services import (
    ActivationsMixin,
    ContractsMixin,
    DeactivationsMixin,
    EdgeKVAccessTokensMixin,
    EdgeKVInitializeMixin,
    EdgeKVItemsMixin,
    EdgeKVNamespacesMixin,
    EdgeWorkerIDsMixin,
    EdgeWorkerVersionsMixin,
    PermissionGroupsMixin,
    PropertiesMixin,
    ReportsMixin,
    ResourceTiersMixin,
    SecureTokensMixin,
    ValidationsMixin,
)
from .session import Session

logger = structlog.get_logger()


class EdgeWorkersClient(
    ActivationsMixin,
    ContractsMixin,
    DeactivationsMixin,
    EdgeKVAccessTokensMixin,
    EdgeKVInitializeMixin,
    EdgeKVItemsMixin,
    EdgeKVNamespacesMixin,
    EdgeWorkerIDsMixin,
    EdgeWorkerVersionsMixin,
    PermissionGroupsMixin,
    PropertiesMixin,
    ReportsMixin,
    ResourceTiersMixin,
    SecureTokensMixin,
    ValidationsMixin,
):
    """
    EdgeWorkers Client - HTTP API

    Every operation validates its request, issues one signed call and
    decodes the response. Failures raise StructValidationError,
    RequestFailedError or APIError, prefixed with the operation name.

    Example:
        >>> async with EdgeWorkersClient.from_edgerc() as client:
        ...     activations = await client.list_activations(ListActivationsRequest(edgeworker_id=42))
        ...     contracts = await client.list_contracts()
    """

    def __init__(
        self,
        config: EdgeGridConfig,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize EdgeWorkers Client

        Args:
            config: EdgeGrid credentials
            settings: Client settings, defaults to get_settings()
            transport: Optional httpx transport replacing the network
        """
        self.session = Session(config, settings=settings, transport=transport)

    @classmethod
    def from_edgerc(
        cls,
        path: str | None = None,
        section: str | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "EdgeWorkersClient":
        """Build a client from .edgerc credentials, honouring Settings defaults"""
        settings = settings or get_settings()
        config = EdgeGridConfig.load(
            path or settings.edgerc,
            section or settings.section,
            use_env=settings.use_env,
        )
        logger.info("edgeworkers_client_created", host=config.host, section=section or settings.section)
        return cls(config, settings=settings, transport=transport)

    async def close(self) -> None:
        """Close the HTTP client"""
        await self.session.close()

    async def __aenter__(self) -> "EdgeWorkersClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
