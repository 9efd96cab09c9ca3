"""EdgeKV Initialization"""

import structlog
from pydantic import BaseModel, ConfigDict, Field

from .base import ServiceMixin

logger = structlog.get_logger()

INITIALIZE_PATH = "/edgekv/v1/initialize"


class EdgeKVInitializationStatus(BaseModel):
    """EdgeKV database initialization state of the account"""

    model_config = ConfigDict(populate_by_name=True)

    account_status: str = Field(default="", alias="accountStatus")
    cpcode: str = ""
    production_status: str = Field(default="", alias="productionStatus")
    staging_status: str = Field(default="", alias="stagingStatus")


class EdgeKVInitializeMixin(ServiceMixin):
    async def initialize_edgekv(self) -> EdgeKVInitializationStatus:
        """Initialize the EdgeKV database"""
        operation = "initialize EdgeKV"
        logger.debug("initialize_edgekv")

        response = await self._call(operation, "PUT", INITIALIZE_PATH, expected=201)
        return self._decode(operation, EdgeKVInitializationStatus, response)

    async def get_edgekv_initialization_status(self) -> EdgeKVInitializationStatus:
        """Get the current initialization status"""
        operation = "get EdgeKV initialization status"
        logger.debug("get_edgekv_initialization_status")

        response = await self._call(operation, "GET", INITIALIZE_PATH)
        return self._decode(operation, EdgeKVInitializationStatus, response)
