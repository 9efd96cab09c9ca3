"""
Secure Tokens

Tokens that enable the enhanced debug headers for EdgeWorkers requests.
"""

from dataclasses import dataclass
from typing import Annotated

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..core import validation as v
from .activations import ActivationNetwork
from .base import ServiceMixin

logger = structlog.get_logger()

MAX_EXPIRY = 720


@dataclass
class CreateSecureTokenRequest:
    hostname: v.Text = ""
    acl: str = ""
    url: str = ""
    # minutes, 0 leaves the API default
    expiry: Annotated[int, Field(ge=0, le=MAX_EXPIRY)] = 0
    network: ActivationNetwork | None = None
    property_id: str = ""

    @field_validator("url")
    @classmethod
    def check_exclusive(cls, value: str, info: ValidationInfo) -> str:
        if value and info.data.get("acl"):
            raise PydanticCustomError("exclusive", "only one of acl or url can be provided")
        return value

    def body(self) -> dict:
        """JSON body without empty fields"""
        body = {
            "acl": self.acl,
            "expiry": self.expiry,
            "hostname": self.hostname,
            "network": ActivationNetwork(self.network).value if self.network else "",
            "propertyId": self.property_id,
            "url": self.url,
        }
        return {key: value for key, value in body.items() if value}


class CreateSecureTokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    akamai_ew_trace: str = Field(default="", alias="akamaiEwTrace")


class SecureTokensMixin(ServiceMixin):
    async def create_secure_token(self, params: CreateSecureTokenRequest) -> CreateSecureTokenResponse:
        """Create a secure token for debugging an EdgeWorker"""
        operation = "create secure token"
        logger.debug("create_secure_token", hostname=params.hostname)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "POST",
            "/edgeworkers/v1/secure-token",
            expected=201,
            json=params.body(),
        )
        return self._decode(operation, CreateSecureTokenResponse, response)
