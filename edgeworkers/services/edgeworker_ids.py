"""
EdgeWorker IDs

EdgeWorker identifiers: the named containers versions are uploaded to.
"""

from dataclasses import dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()

IDS_PATH = "/edgeworkers/v1/ids"


@dataclass
class GetEdgeWorkerIDRequest:
    edgeworker_id: v.ID = 0


@dataclass
class DeleteEdgeWorkerIDRequest:
    edgeworker_id: v.ID = 0


@dataclass
class ListEdgeWorkersIDRequest:
    group_id: int = 0
    resource_tier_id: int = 0


@dataclass
class CreateEdgeWorkerIDRequest:
    name: v.Text = ""
    group_id: v.ID = 0
    resource_tier_id: v.ID = 0

    def body(self) -> dict:
        return {"name": self.name, "groupId": self.group_id, "resourceTierId": self.resource_tier_id}


@dataclass
class UpdateEdgeWorkerIDRequest(CreateEdgeWorkerIDRequest):
    edgeworker_id: v.ID = 0


@dataclass
class CloneEdgeWorkerIDRequest(UpdateEdgeWorkerIDRequest):
    pass


class EdgeWorkerID(BaseModel):
    """EdgeWorker ID record"""

    model_config = ConfigDict(populate_by_name=True)

    edgeworker_id: int = Field(default=0, alias="edgeWorkerId")
    name: str = ""
    account_id: str = Field(default="", alias="accountId")
    group_id: int = Field(default=0, alias="groupId")
    resource_tier_id: int = Field(default=0, alias="resourceTierId")
    source_edgeworker_id: int = Field(default=0, alias="sourceEdgeWorkerId")
    created_by: str = Field(default="", alias="createdBy")
    created_time: str = Field(default="", alias="createdTime")
    last_modified_by: str = Field(default="", alias="lastModifiedBy")
    last_modified_time: str = Field(default="", alias="lastModifiedTime")


class ListEdgeWorkersIDResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    edgeworkers: list[EdgeWorkerID] = Field(default_factory=list, alias="edgeWorkerIds")


class EdgeWorkerIDsMixin(ServiceMixin):
    async def get_edgeworker_id(self, params: GetEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Get EdgeWorker ID"""
        operation = "get an EdgeWorker ID"
        logger.debug("get_edgeworker_id", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"{IDS_PATH}/{params.edgeworker_id}")
        return self._decode(operation, EdgeWorkerID, response)

    async def list_edgeworkers_id(self, params: ListEdgeWorkersIDRequest | None = None) -> ListEdgeWorkersIDResponse:
        """List EdgeWorker IDs, optionally filtered by group and resource tier"""
        operation = "list EdgeWorkers IDs"
        logger.debug("list_edgeworkers_id")
        params = params or ListEdgeWorkersIDRequest()

        query = {}
        if params.group_id:
            query["groupId"] = str(params.group_id)
        if params.resource_tier_id:
            query["resourceTierId"] = str(params.resource_tier_id)

        response = await self._call(operation, "GET", IDS_PATH, params=query)
        return self._decode(operation, ListEdgeWorkersIDResponse, response)

    async def create_edgeworker_id(self, params: CreateEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Create EdgeWorker ID"""
        operation = "create an EdgeWorker ID"
        logger.debug("create_edgeworker_id", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(operation, "POST", IDS_PATH, expected=201, json=params.body())
        return self._decode(operation, EdgeWorkerID, response)

    async def update_edgeworker_id(self, params: UpdateEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Update name, group or resource tier of an EdgeWorker ID"""
        operation = "update an EdgeWorker ID"
        logger.debug("update_edgeworker_id", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation, "PUT", f"{IDS_PATH}/{params.edgeworker_id}", json=params.body()
        )
        return self._decode(operation, EdgeWorkerID, response)

    async def clone_edgeworker_id(self, params: CloneEdgeWorkerIDRequest) -> EdgeWorkerID:
        """Clone an EdgeWorker ID, possibly onto another resource tier"""
        operation = "clone an EdgeWorker ID"
        logger.debug("clone_edgeworker_id", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation, "POST", f"{IDS_PATH}/{params.edgeworker_id}/clone", json=params.body()
        )
        return self._decode(operation, EdgeWorkerID, response)

    async def delete_edgeworker_id(self, params: DeleteEdgeWorkerIDRequest) -> None:
        """Delete EdgeWorker ID"""
        operation = "delete an EdgeWorker ID"
        logger.debug("delete_edgeworker_id", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        await self._call(operation, "DELETE", f"{IDS_PATH}/{params.edgeworker_id}", expected=204)
