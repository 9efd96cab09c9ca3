"""Properties using an EdgeWorker"""

from dataclasses import dataclass

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()


@dataclass
class ListPropertiesRequest:
    edgeworker_id: v.ID = 0
    active_only: bool = False


class Property(BaseModel):
    """Property associated with an EdgeWorker; missing versions are 0"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="propertyId")
    name: str = Field(default="", alias="propertyName")
    staging_version: int = Field(default=0, alias="stagingVersion")
    production_version: int = Field(default=0, alias="productionVersion")
    latest_version: int = Field(default=0, alias="latestVersion")

    @field_validator("staging_version", "production_version", "latest_version", mode="before")
    @classmethod
    def null_version(cls, v: int | None) -> int:
        return 0 if v is None else v


class ListPropertiesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    properties: list[Property] = Field(default_factory=list)
    limited_access_to_properties: bool = Field(default=False, alias="limitedAccessToProperties")


class PropertiesMixin(ServiceMixin):
    async def list_properties(self, params: ListPropertiesRequest) -> ListPropertiesResponse:
        """List properties associated with an EdgeWorker"""
        operation = "list properties"
        logger.debug("list_properties", edgeworker_id=params.edgeworker_id)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "GET",
            f"/edgeworkers/v1/ids/{params.edgeworker_id}/properties",
            params={"activeOnly": "true" if params.active_only else "false"},
        )
        return self._decode(operation, ListPropertiesResponse, response)
