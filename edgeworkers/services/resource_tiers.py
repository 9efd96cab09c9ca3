"""
Resource Tiers

Limits available to EdgeWorkers per contract.
"""

from dataclasses import dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()


@dataclass
class ListResourceTiersRequest:
    contract_id: v.Text = ""


@dataclass
class GetResourceTierRequest:
    edgeworker_id: v.ID = 0


class EdgeWorkerLimit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    limit_name: str = Field(default="", alias="limitName")
    limit_value: int = Field(default=0, alias="limitValue")
    limit_unit: str = Field(default="", alias="limitUnit")


class ResourceTier(BaseModel):
    """Resource tier and its limits"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="resourceTierId")
    name: str = Field(default="", alias="resourceTierName")
    edgeworker_limits: list[EdgeWorkerLimit] = Field(default_factory=list, alias="edgeWorkerLimits")


class ListResourceTiersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resource_tiers: list[ResourceTier] = Field(default_factory=list, alias="resourceTiers")


class ResourceTiersMixin(ServiceMixin):
    async def list_resource_tiers(self, params: ListResourceTiersRequest) -> ListResourceTiersResponse:
        """List resource tiers of a contract"""
        operation = "list resource tiers"
        logger.debug("list_resource_tiers", contract_id=params.contract_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "GET",
            "/edgeworkers/v1/resource-tiers",
            params={"contractId": params.contract_id},
        )
        return self._decode(operation, ListResourceTiersResponse, response)

    async def get_resource_tier(self, params: GetResourceTierRequest) -> ResourceTier:
        """Get the resource tier an EdgeWorker runs on"""
        operation = "get a resource tier"
        logger.debug("get_resource_tier", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation, "GET", f"/edgeworkers/v1/ids/{params.edgeworker_id}/resource-tier"
        )
        return self._decode(operation, ResourceTier, response)
