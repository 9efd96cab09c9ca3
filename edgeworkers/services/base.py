"""
Service Base

Validate, execute, check status and decode steps shared by every operation.
"""

from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ..core import validation as v
from ..core.exceptions import RequestFailedError, StructValidationError
from ..session import Session

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)
RequestT = TypeVar("RequestT")


class ServiceMixin:
    """Helpers used by the resource mixins composed into EdgeWorkersClient"""

    session: Session

    def _validate(self, operation: str, request: RequestT) -> RequestT:
        """Check request constraints, returning the validated request"""
        try:
            return v.validate_request(request)
        except ValidationError as e:
            errors = v.field_errors(e)
            logger.debug("edgeworkers_validation_failed", operation=operation, errors=errors)
            raise StructValidationError(errors, operation) from e

    async def _call(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        expected: int = 200,
        params: dict[str, Any] | None = None,
        json: Any = None,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Execute and check the status code, raising APIError otherwise"""
        response = await self.session.exec(
            operation,
            method,
            path,
            params=params,
            json=json,
            content=content,
            headers=headers,
        )
        if response.status_code != expected:
            raise self.session.error(response, operation)
        return response

    def _decode(self, operation: str, model: type[ModelT], response: httpx.Response) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise RequestFailedError(f"request failed: {e}", operation) from e

    def _decode_list(self, operation: str, response: httpx.Response) -> list[Any]:
        """Decode a bare JSON array body"""
        try:
            result = response.json()
        except ValueError as e:
            raise RequestFailedError(f"request failed: {e}", operation) from e
        if not isinstance(result, list):
            raise RequestFailedError("request failed: expected a JSON array", operation)
        return result
