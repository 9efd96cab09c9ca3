"""
Deactivations

Remove an activated EdgeWorker version from a network.
"""

from dataclasses import dataclass
from typing import Annotated

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core import validation as v
from .activations import ActivationNetwork
from .base import ServiceMixin

logger = structlog.get_logger()


@dataclass
class ListDeactivationsRequest:
    edgeworker_id: v.ID = 0
    version: str = ""


@dataclass
class GetDeactivationRequest:
    edgeworker_id: v.ID = 0
    deactivation_id: v.ID = 0


@dataclass
class DeactivateVersionRequest:
    edgeworker_id: v.ID = 0
    network: Annotated[ActivationNetwork | None, v.Required] = None
    version: v.Text = ""
    note: str = ""


class Deactivation(BaseModel):
    """Deactivation record"""

    model_config = ConfigDict(populate_by_name=True)

    edgeworker_id: int = Field(default=0, alias="edgeWorkerId")
    version: str = ""
    deactivation_id: int = Field(default=0, alias="deactivationId")
    account_id: str = Field(default="", alias="accountId")
    status: str = ""
    network: str = ""
    note: str = ""
    created_by: str = Field(default="", alias="createdBy")
    created_time: str = Field(default="", alias="createdTime")
    last_modified_time: str = Field(default="", alias="lastModifiedTime")


class ListDeactivationsResponse(BaseModel):
    deactivations: list[Deactivation] = Field(default_factory=list)


class DeactivationsMixin(ServiceMixin):
    async def list_deactivations(self, params: ListDeactivationsRequest) -> ListDeactivationsResponse:
        """List deactivations of an EdgeWorker, optionally for one version"""
        operation = "list deactivations"
        logger.debug("list_deactivations", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        query = {}
        if params.version:
            query["version"] = params.version

        response = await self._call(
            operation,
            "GET",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/deactivations",
            params=query,
        )
        return self._decode(operation, ListDeactivationsResponse, response)

    async def get_deactivation(self, params: GetDeactivationRequest) -> Deactivation:
        """Get deactivation by ID"""
        operation = "get deactivation"
        logger.debug("get_deactivation", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "GET",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/deactivations/{params.deactivation_id}",
        )
        return self._decode(operation, Deactivation, response)

    async def deactivate_version(self, params: DeactivateVersionRequest) -> Deactivation:
        """Deactivate a version on a network"""
        operation = "deactivate version"
        logger.debug("deactivate_version", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        body = {"network": params.network.value, "version": params.version}
        if params.note:
            body["note"] = params.note

        response = await self._call(
            operation,
            "POST",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/deactivations",
            expected=201,
            json=body,
        )
        return self._decode(operation, Deactivation, response)
