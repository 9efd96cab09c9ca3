"""Bundle Validation"""

from dataclasses import dataclass

import structlog
from pydantic import BaseModel, Field

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()


@dataclass
class ValidateBundleRequest:
    bundle: v.Content = b""


class ValidationIssue(BaseModel):
    type: str = ""
    message: str = ""


class ValidateBundleResponse(BaseModel):
    """Errors and warnings found in a code bundle"""

    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)


class ValidationsMixin(ServiceMixin):
    async def validate_bundle(self, params: ValidateBundleRequest) -> ValidateBundleResponse:
        """Validate a code bundle without uploading it"""
        operation = "validate a bundle"
        logger.debug("validate_bundle", size=len(params.bundle))
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "POST",
            "/edgeworkers/v1/validations",
            content=params.bundle,
            headers={"Content-Type": "application/gzip"},
        )
        return self._decode(operation, ValidateBundleResponse, response)
