"""
EdgeWorker Versions

Code bundles uploaded to an EdgeWorker ID. Bundles are gzip tarballs
passed as bytes.
"""

from dataclasses import dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()

GZIP = "application/gzip"


@dataclass
class EdgeWorkerVersionRequest:
    edgeworker_id: v.ID = 0
    version: v.Text = ""

    @property
    def path(self) -> str:
        return f"/edgeworkers/v1/ids/{self.edgeworker_id}/versions/{self.version}"


@dataclass
class GetEdgeWorkerVersionRequest(EdgeWorkerVersionRequest):
    pass


@dataclass
class GetEdgeWorkerVersionContentRequest(EdgeWorkerVersionRequest):
    pass


@dataclass
class DeleteEdgeWorkerVersionRequest(EdgeWorkerVersionRequest):
    pass


@dataclass
class ListEdgeWorkerVersionsRequest:
    edgeworker_id: v.ID = 0


@dataclass
class CreateEdgeWorkerVersionRequest:
    edgeworker_id: v.ID = 0
    content_bundle: v.Content = b""


class EdgeWorkerVersion(BaseModel):
    """Uploaded version of an EdgeWorker"""

    model_config = ConfigDict(populate_by_name=True)

    edgeworker_id: int = Field(default=0, alias="edgeWorkerId")
    version: str = ""
    account_id: str = Field(default="", alias="accountId")
    checksum: str = ""
    sequence_number: int = Field(default=0, alias="sequenceNumber")
    created_by: str = Field(default="", alias="createdBy")
    created_time: str = Field(default="", alias="createdTime")


class ListEdgeWorkerVersionsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    edgeworker_versions: list[EdgeWorkerVersion] = Field(default_factory=list, alias="versions")


class EdgeWorkerVersionsMixin(ServiceMixin):
    async def get_edgeworker_version(self, params: GetEdgeWorkerVersionRequest) -> EdgeWorkerVersion:
        """Get EdgeWorker version"""
        operation = "get an EdgeWorker Version"
        logger.debug("get_edgeworker_version", edgeworker_id=params.edgeworker_id, version=params.version)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", params.path)
        return self._decode(operation, EdgeWorkerVersion, response)

    async def list_edgeworker_versions(self, params: ListEdgeWorkerVersionsRequest) -> ListEdgeWorkerVersionsResponse:
        """List versions of an EdgeWorker"""
        operation = "list EdgeWorkers Versions"
        logger.debug("list_edgeworker_versions", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"/edgeworkers/v1/ids/{params.edgeworker_id}/versions")
        return self._decode(operation, ListEdgeWorkerVersionsResponse, response)

    async def get_edgeworker_version_content(self, params: GetEdgeWorkerVersionContentRequest) -> bytes:
        """Download the code bundle of a version"""
        operation = "get an EdgeWorker Version Content Bundle"
        logger.debug("get_edgeworker_version_content", edgeworker_id=params.edgeworker_id, version=params.version)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"{params.path}/content", headers={"Accept": GZIP})
        return response.content

    async def create_edgeworker_version(self, params: CreateEdgeWorkerVersionRequest) -> EdgeWorkerVersion:
        """Upload a code bundle as a new version"""
        operation = "create an EdgeWorker Version"
        logger.debug("create_edgeworker_version", edgeworker_id=params.edgeworker_id, size=len(params.content_bundle))
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "POST",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/versions",
            expected=201,
            content=params.content_bundle,
            headers={"Content-Type": GZIP},
        )
        return self._decode(operation, EdgeWorkerVersion, response)

    async def delete_edgeworker_version(self, params: DeleteEdgeWorkerVersionRequest) -> None:
        """Delete EdgeWorker version"""
        operation = "delete an EdgeWorker Version"
        logger.debug("delete_edgeworker_version", edgeworker_id=params.edgeworker_id, version=params.version)
        params = self._validate(operation, params)

        await self._call(operation, "DELETE", params.path, expected=204)
