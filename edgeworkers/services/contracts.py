"""Contracts"""

import structlog
from pydantic import BaseModel, ConfigDict, Field

from .base import ServiceMixin

logger = structlog.get_logger()


class ListContractsResponse(BaseModel):
    """Contract IDs usable to list resource tiers"""

    model_config = ConfigDict(populate_by_name=True)

    contract_ids: list[str] = Field(default_factory=list, alias="contractIds")


class ContractsMixin(ServiceMixin):
    async def list_contracts(self) -> ListContractsResponse:
        """List contract IDs"""
        operation = "listing contracts"
        logger.debug("list_contracts")

        response = await self._call(operation, "GET", "/edgeworkers/v1/contracts")
        return self._decode(operation, ListContractsResponse, response)
