"""Permission Groups"""

from dataclasses import dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()


@dataclass
class GetPermissionGroupRequest:
    group_id: v.Text = ""


class PermissionGroup(BaseModel):
    """Group and the EdgeWorkers capabilities enabled within it"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="groupId")
    name: str = Field(default="", alias="groupName")
    capabilities: list[str] = Field(default_factory=list)


class ListPermissionGroupsResponse(BaseModel):
    permission_groups: list[PermissionGroup] = Field(default_factory=list, alias="groups")


class PermissionGroupsMixin(ServiceMixin):
    async def get_permission_group(self, params: GetPermissionGroupRequest) -> PermissionGroup:
        """Get capabilities enabled within a group"""
        operation = "get a permission group"
        logger.debug("get_permission_group", group_id=params.group_id)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"/edgeworkers/v1/groups/{params.group_id}")
        return self._decode(operation, PermissionGroup, response)

    async def list_permission_groups(self) -> ListPermissionGroupsResponse:
        """List groups and their capabilities"""
        operation = "list permission groups"
        logger.debug("list_permission_groups")

        response = await self._call(operation, "GET", "/edgeworkers/v1/groups")
        return self._decode(operation, ListPermissionGroupsResponse, response)
