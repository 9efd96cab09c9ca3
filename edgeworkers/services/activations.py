"""
Activations

Deploy EdgeWorker versions to the staging or production network.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()


class ActivationNetwork(str, Enum):
    """Network an EdgeWorker version is activated on"""

    STAGING = "STAGING"
    PRODUCTION = "PRODUCTION"


# ============================================
# Requests
# ============================================


@dataclass
class ListActivationsRequest:
    edgeworker_id: v.ID = 0
    version: str = ""


@dataclass
class GetActivationRequest:
    edgeworker_id: v.ID = 0
    activation_id: v.ID = 0


@dataclass
class CreateActivationRequest:
    edgeworker_id: v.ID = 0
    network: Annotated[ActivationNetwork | None, v.Required] = None
    version: v.Text = ""
    note: str = ""


@dataclass
class CancelActivationRequest:
    edgeworker_id: v.ID = 0
    activation_id: v.ID = 0


# ============================================
# Responses
# ============================================


class Activation(BaseModel):
    """Activation record"""

    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(default="", alias="accountId")
    activation_id: int = Field(default=0, alias="activationId")
    created_by: str = Field(default="", alias="createdBy")
    created_time: str = Field(default="", alias="createdTime")
    edgeworker_id: int = Field(default=0, alias="edgeWorkerId")
    last_modified_time: str = Field(default="", alias="lastModifiedTime")
    network: str = ""
    status: str = ""
    version: str = ""
    note: str = ""


class ListActivationsResponse(BaseModel):
    activations: list[Activation] = Field(default_factory=list)


# ============================================
# Operations
# ============================================


class ActivationsMixin(ServiceMixin):
    """Activation lifecycle: list, get, create, cancel"""

    async def list_activations(self, params: ListActivationsRequest) -> ListActivationsResponse:
        """List activations of an EdgeWorker, optionally for one version"""
        operation = "listing activations"
        logger.debug("list_activations", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        query = {}
        if params.version:
            query["version"] = params.version

        response = await self._call(
            operation,
            "GET",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/activations",
            params=query,
        )
        return self._decode(operation, ListActivationsResponse, response)

    async def get_activation(self, params: GetActivationRequest) -> Activation:
        """Get activation by ID"""
        operation = "getting activation"
        logger.debug("get_activation", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "GET",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/activations/{params.activation_id}",
        )
        return self._decode(operation, Activation, response)

    async def create_activation(self, params: CreateActivationRequest) -> Activation:
        """Activate a version on a network"""
        operation = "creating activation"
        logger.debug("create_activation", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        body = {"network": params.network.value, "version": params.version}
        if params.note:
            body["note"] = params.note

        response = await self._call(
            operation,
            "POST",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/activations",
            expected=201,
            json=body,
        )
        return self._decode(operation, Activation, response)

    async def cancel_activation(self, params: CancelActivationRequest) -> Activation:
        """Cancel a pending activation"""
        operation = "canceling activation"
        logger.debug("cancel_activation", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "DELETE",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/activations/{params.activation_id}",
        )
        return self._decode(operation, Activation, response)
