"""
EdgeKV Namespaces

Namespace management on the EdgeKV staging and production networks,
including scheduled deletion.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated

import structlog
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()

MIN_RETENTION = 86400
MAX_RETENTION = 315360000


class EdgeKVNetwork(str, Enum):
    """EdgeKV network"""

    STAGING = "staging"
    PRODUCTION = "production"


def _check_retention(retention: int) -> int:
    """0 keeps data forever, anything else must fall in the allowed window"""
    if retention != 0 and not MIN_RETENTION <= retention <= MAX_RETENTION:
        raise PydanticCustomError(
            "retention_period",
            "a non zero value specified for retention period cannot be less than {min} or more than {max}",
            {"min": MIN_RETENTION, "max": MAX_RETENTION},
        )
    return retention


Network = Annotated[EdgeKVNetwork | None, v.Required]
Retention = Annotated[Annotated[int, AfterValidator(_check_retention)] | None, v.Required]
GroupID = Annotated[Annotated[int, Field(ge=0)] | None, v.Required]


def _network(network: EdgeKVNetwork | str) -> str:
    return EdgeKVNetwork(network).value


# ============================================
# Requests
# ============================================


@dataclass
class ListEdgeKVNamespacesRequest:
    network: Network = None
    details: bool = False


@dataclass
class NamespaceRequest:
    """Network and namespace name, shared by the single-namespace operations"""

    network: Network = None
    name: v.Name = ""


@dataclass
class GetEdgeKVNamespaceRequest(NamespaceRequest):
    pass


@dataclass
class GetScheduledDeleteTimeRequest(NamespaceRequest):
    pass


@dataclass
class CancelScheduledNamespaceDeleteRequest(NamespaceRequest):
    pass


@dataclass
class ListGroupsWithinNamespaceRequest(NamespaceRequest):
    pass


@dataclass
class CreateEdgeKVNamespaceRequest:
    network: Network = None
    name: v.Name = ""
    geo_location: str = ""
    retention_in_seconds: Retention = None
    group_id: GroupID = None

    def body(self) -> dict:
        body = {"namespace": self.name}
        if self.geo_location:
            body["geoLocation"] = self.geo_location
        body["retentionInSeconds"] = self.retention_in_seconds
        body["groupId"] = self.group_id
        return body


@dataclass
class UpdateEdgeKVNamespaceRequest:
    network: Network = None
    name: v.Name = ""
    retention_in_seconds: Retention = None
    group_id: GroupID = None

    def body(self) -> dict:
        return {
            "namespace": self.name,
            "retentionInSeconds": self.retention_in_seconds,
            "groupId": self.group_id,
        }


@dataclass
class DeleteEdgeKVNamespaceRequest:
    network: Network = None
    name: v.Name = ""
    sync: bool = False


@dataclass
class RescheduleNamespaceDeleteRequest:
    network: Network = None
    name: v.Name = ""
    scheduled_delete_time: Annotated[datetime | None, v.Required] = None


# ============================================
# Responses
# ============================================


class Namespace(BaseModel):
    """EdgeKV namespace"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="namespace")
    geo_location: str = Field(default="", alias="geoLocation")
    retention_in_seconds: int | None = Field(default=None, alias="retentionInSeconds")
    group_id: int | None = Field(default=None, alias="groupId")


class ListEdgeKVNamespacesResponse(BaseModel):
    namespaces: list[Namespace] = Field(default_factory=list)


class DeleteEdgeKVNamespaceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scheduled_delete_time: datetime | None = Field(default=None, alias="scheduledDeleteTime")


class ScheduledDeleteTime(BaseModel):
    """Scheduled namespace deletion, with the Retry-After header of the response"""

    model_config = ConfigDict(populate_by_name=True)

    scheduled_delete_time: datetime = Field(alias="scheduledDeleteTime")
    retry_after: str = Field(default="", exclude=True)


# ============================================
# Operations
# ============================================


class EdgeKVNamespacesMixin(ServiceMixin):
    @staticmethod
    def _namespaces_path(network: EdgeKVNetwork | str) -> str:
        return f"/edgekv/v1/networks/{_network(network)}/namespaces"

    async def list_edgekv_namespaces(self, params: ListEdgeKVNamespacesRequest) -> ListEdgeKVNamespacesResponse:
        """List namespaces of a network"""
        operation = "list EdgeKV namespaces"
        logger.debug("list_edgekv_namespaces", network=str(params.network))
        params = self._validate(operation, params)

        query = {}
        if params.details:
            query["details"] = "on"

        response = await self._call(operation, "GET", self._namespaces_path(params.network), params=query)
        return self._decode(operation, ListEdgeKVNamespacesResponse, response)

    async def get_edgekv_namespace(self, params: GetEdgeKVNamespaceRequest) -> Namespace:
        """Get a namespace by name"""
        operation = "get an EdgeKV namespace"
        logger.debug("get_edgekv_namespace", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"{self._namespaces_path(params.network)}/{params.name}")
        return self._decode(operation, Namespace, response)

    async def create_edgekv_namespace(self, params: CreateEdgeKVNamespaceRequest) -> Namespace:
        """Create a namespace"""
        operation = "create an EdgeKV namespace"
        logger.debug("create_edgekv_namespace", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(
            operation, "POST", self._namespaces_path(params.network), json=params.body()
        )
        return self._decode(operation, Namespace, response)

    async def update_edgekv_namespace(self, params: UpdateEdgeKVNamespaceRequest) -> Namespace:
        """Update retention or group of a namespace"""
        operation = "update an EdgeKV namespace"
        logger.debug("update_edgekv_namespace", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "PUT",
            f"{self._namespaces_path(params.network)}/{params.name}",
            json=params.body(),
        )
        return self._decode(operation, Namespace, response)

    async def delete_edgekv_namespace(self, params: DeleteEdgeKVNamespaceRequest) -> DeleteEdgeKVNamespaceResponse:
        """
        Delete a namespace

        A synchronous delete answers 200; otherwise the deletion is scheduled
        and the API answers 202 with the scheduled time.
        """
        operation = "delete an EdgeKV namespace"
        logger.debug("delete_edgekv_namespace", name=params.name, sync=params.sync)
        params = self._validate(operation, params)

        query = {}
        if params.sync:
            query["sync"] = "true"

        response = await self._call(
            operation,
            "DELETE",
            f"{self._namespaces_path(params.network)}/{params.name}",
            expected=200 if params.sync else 202,
            params=query,
        )
        return self._decode(operation, DeleteEdgeKVNamespaceResponse, response)

    async def get_scheduled_delete_time(self, params: GetScheduledDeleteTimeRequest) -> ScheduledDeleteTime:
        """Get the scheduled delete time of a namespace"""
        operation = "get scheduled delete time for an EdgeKV namespace"
        logger.debug("get_scheduled_delete_time", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "GET",
            f"{self._namespaces_path(params.network)}/{params.name}/status/scheduled-delete",
        )
        result = self._decode(operation, ScheduledDeleteTime, response)
        result.retry_after = response.headers.get("Retry-After", "")
        return result

    async def reschedule_namespace_delete(self, params: RescheduleNamespaceDeleteRequest) -> ScheduledDeleteTime:
        """Change the scheduled delete time of a namespace"""
        operation = "change the scheduled time of an EdgeKV namespace delete"
        logger.debug("reschedule_namespace_delete", name=params.name)
        params = self._validate(operation, params)

        body = ScheduledDeleteTime(scheduled_delete_time=params.scheduled_delete_time)
        response = await self._call(
            operation,
            "PUT",
            f"{self._namespaces_path(params.network)}/{params.name}/status/scheduled-delete",
            json=body.model_dump(mode="json", by_alias=True),
        )
        result = self._decode(operation, ScheduledDeleteTime, response)
        result.retry_after = response.headers.get("Retry-After", "")
        return result

    async def cancel_scheduled_namespace_delete(self, params: CancelScheduledNamespaceDeleteRequest) -> None:
        """Cancel a scheduled namespace delete"""
        operation = "cancel the scheduled namespace delete"
        logger.debug("cancel_scheduled_namespace_delete", name=params.name)
        params = self._validate(operation, params)

        await self._call(
            operation,
            "DELETE",
            f"{self._namespaces_path(params.network)}/{params.name}/status/scheduled-delete",
            expected=204,
        )

    async def list_groups_within_namespace(self, params: ListGroupsWithinNamespaceRequest) -> list[str]:
        """List group IDs of a namespace"""
        operation = "list groups within namespace"
        logger.debug("list_groups_within_namespace", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(
            operation, "GET", f"{self._namespaces_path(params.network)}/{params.name}/groups"
        )
        return [str(group) for group in self._decode_list(operation, response)]
