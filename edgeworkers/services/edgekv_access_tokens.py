"""
EdgeKV Access Tokens

Tokens that grant EdgeWorkers access to EdgeKV namespaces.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()

TOKENS_PATH = "/edgekv/v1/tokens"


class Permission(str, Enum):
    """Namespace permission"""

    READ = "r"
    WRITE = "w"
    DELETE = "d"


# ============================================
# Requests
# ============================================


NamespacePermissions = Annotated[
    dict[v.Text, Annotated[list[Permission], Field(min_length=1)]],
    Field(min_length=1),
]


@dataclass
class CreateEdgeKVAccessTokenRequest:
    name: v.Name = ""
    allow_on_production: bool = False
    allow_on_staging: bool = False
    namespace_permissions: NamespacePermissions = field(default_factory=dict)
    restrict_to_edgeworker_ids: list[str] = field(default_factory=list)

    @field_validator("allow_on_staging")
    @classmethod
    def check_networks(cls, value: bool, info: ValidationInfo) -> bool:
        if not value and not info.data.get("allow_on_production"):
            raise PydanticCustomError(
                "network_required",
                "at least one of allow_on_production or allow_on_staging has to be provided",
            )
        return value

    def body(self) -> dict:
        return {
            "allowOnProduction": self.allow_on_production,
            "allowOnStaging": self.allow_on_staging,
            "name": self.name,
            "namespacePermissions": {
                namespace: [Permission(p).value for p in permissions]
                for namespace, permissions in self.namespace_permissions.items()
            },
            "restrictToEdgeWorkerIds": self.restrict_to_edgeworker_ids,
        }


@dataclass
class GetEdgeKVAccessTokenRequest:
    token_name: v.Name = ""


@dataclass
class ListEdgeKVAccessTokensRequest:
    include_expired: bool = False


@dataclass
class DeleteEdgeKVAccessTokenRequest:
    token_name: v.Name = ""


# ============================================
# Responses
# ============================================


class EdgeKVAccessToken(BaseModel):
    """Token summary as listed"""

    model_config = ConfigDict(populate_by_name=True)

    expiry: str = ""
    name: str = ""
    uuid: str = ""
    token_activation_status: str | None = Field(default=None, alias="tokenActivationStatus")
    issue_date: str | None = Field(default=None, alias="issueDate")
    latest_refresh_date: str | None = Field(default=None, alias="latestRefreshDate")
    next_scheduled_refresh_date: str | None = Field(default=None, alias="nextScheduledRefreshDate")


class EdgeKVAccessTokenDetails(BaseModel):
    """Full token returned on create and get"""

    model_config = ConfigDict(populate_by_name=True)

    allow_on_production: bool = Field(default=False, alias="allowOnProduction")
    allow_on_staging: bool = Field(default=False, alias="allowOnStaging")
    cpcode: str = ""
    expiry: str = ""
    issue_date: str = Field(default="", alias="issueDate")
    latest_refresh_date: str | None = Field(default=None, alias="latestRefreshDate")
    name: str = ""
    namespace_permissions: dict[str, list[str]] = Field(default_factory=dict, alias="namespacePermissions")
    next_scheduled_refresh_date: str = Field(default="", alias="nextScheduledRefreshDate")
    restrict_to_edgeworker_ids: list[str] = Field(default_factory=list, alias="restrictToEdgeWorkerIds")
    token_activation_status: str = Field(default="", alias="tokenActivationStatus")
    uuid: str = ""


class ListEdgeKVAccessTokensResponse(BaseModel):
    tokens: list[EdgeKVAccessToken] = Field(default_factory=list)


class DeleteEdgeKVAccessTokenResponse(BaseModel):
    name: str = ""
    uuid: str = ""


# ============================================
# Operations
# ============================================


class EdgeKVAccessTokensMixin(ServiceMixin):
    async def create_edgekv_access_token(
        self, params: CreateEdgeKVAccessTokenRequest
    ) -> EdgeKVAccessTokenDetails:
        """Create an EdgeKV access token"""
        operation = "create an EdgeKV access token"
        logger.debug("create_edgekv_access_token", name=params.name)
        params = self._validate(operation, params)

        response = await self._call(operation, "POST", TOKENS_PATH, json=params.body())
        return self._decode(operation, EdgeKVAccessTokenDetails, response)

    async def get_edgekv_access_token(self, params: GetEdgeKVAccessTokenRequest) -> EdgeKVAccessTokenDetails:
        """Get an EdgeKV access token by name"""
        operation = "get an EdgeKV access token"
        logger.debug("get_edgekv_access_token", name=params.token_name)
        params = self._validate(operation, params)

        response = await self._call(operation, "GET", f"{TOKENS_PATH}/{params.token_name}")
        return self._decode(operation, EdgeKVAccessTokenDetails, response)

    async def list_edgekv_access_tokens(
        self, params: ListEdgeKVAccessTokensRequest | None = None
    ) -> ListEdgeKVAccessTokensResponse:
        """List EdgeKV access tokens"""
        operation = "list EdgeKV access tokens"
        logger.debug("list_edgekv_access_tokens")
        params = params or ListEdgeKVAccessTokensRequest()

        query = {}
        if params.include_expired:
            query["includeExpired"] = "true"

        response = await self._call(operation, "GET", TOKENS_PATH, params=query)
        return self._decode(operation, ListEdgeKVAccessTokensResponse, response)

    async def delete_edgekv_access_token(
        self, params: DeleteEdgeKVAccessTokenRequest
    ) -> DeleteEdgeKVAccessTokenResponse:
        """Revoke an EdgeKV access token"""
        operation = "delete an EdgeKV access token"
        logger.debug("delete_edgekv_access_token", name=params.token_name)
        params = self._validate(operation, params)

        response = await self._call(operation, "DELETE", f"{TOKENS_PATH}/{params.token_name}")
        return self._decode(operation, DeleteEdgeKVAccessTokenResponse, response)
