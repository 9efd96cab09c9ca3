"""EdgeWorkers Exceptions

Error types raised by the EdgeWorkers client.

Three failure categories exist:
- StructValidationError: the request is incomplete or malformed, nothing was sent
- RequestFailedError: the HTTP exchange failed before a response was obtained
- APIError: the API answered with an unexpected status and a problem-details body
"""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EdgeWorkersError(Exception):
    """Base exception for the EdgeWorkers client"""

    def __init__(self, message: str = "", operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(message)

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class ConfigurationError(EdgeWorkersError):
    """Credentials or settings could not be loaded"""

    pass


class StructValidationError(EdgeWorkersError):
    """Request validation failed"""

    def __init__(self, errors: dict[str, str], operation: str | None = None):
        self.errors = errors
        details = "; ".join(f"{name}: {msg}" for name, msg in sorted(errors.items()))
        super().__init__(f"struct validation: {details}", operation)


class RequestFailedError(EdgeWorkersError):
    """Transport failure, raised from the underlying httpx error"""

    pass


# ============================================
# Problem details
# ============================================


class AdditionalDetail(BaseModel):
    """Extra metadata attached by EdgeKV"""

    model_config = ConfigDict(populate_by_name=True)

    request_id: str = Field(default="", alias="requestId")


class ProblemDetails(BaseModel):
    """Problem-details payload returned by the API on failure"""

    model_config = ConfigDict(populate_by_name=True)

    type: str = ""
    title: str = ""
    detail: str = ""
    instance: str = ""
    status: int = 0
    error_code: str = Field(default="", alias="errorCode")
    method: str = ""
    server_ip: str = Field(default="", alias="serverIp")
    client_ip: str = Field(default="", alias="clientIp")
    request_id: str = Field(default="", alias="requestId")
    request_time: str = Field(default="", alias="requestTime")
    authz_realm: str = Field(default="", alias="authzRealm")
    additional_detail: AdditionalDetail = Field(default_factory=AdditionalDetail, alias="additionalDetail")
    errors: list[Any] = Field(default_factory=list)


@dataclass(frozen=True)
class ErrorCondition:
    """Sentinel that an APIError can be matched against"""

    name: str
    status: int
    error_code: str | None = None

    def __str__(self) -> str:
        return self.name


NOT_FOUND = ErrorCondition("resource not found", status=404)
VERSION_ALREADY_DEACTIVATED = ErrorCondition(
    "version already deactivated", status=422, error_code="EW1031"
)


class APIError(EdgeWorkersError):
    """
    API error decoded from a problem-details response

    Two APIErrors are equal when their status and payload are equal; the
    operation prefix is not compared.

    Example:
        >>> try:
        ...     await client.get_activation(GetActivationRequest(42, 1))
        ... except APIError as e:
        ...     if e.matches(NOT_FOUND):
        ...         ...
    """

    def __init__(self, problem: ProblemDetails | None = None, operation: str | None = None, **fields: Any):
        self.problem = problem if problem is not None else ProblemDetails(**fields)
        super().__init__(self._render(), operation)

    def _render(self) -> str:
        payload = self.problem.model_dump(by_alias=True, exclude_defaults=True)
        return "API error: \n" + json.dumps(payload, indent="\t")

    # Shortcuts to the payload
    @property
    def status(self) -> int:
        return self.problem.status

    @property
    def error_code(self) -> str:
        return self.problem.error_code

    @property
    def title(self) -> str:
        return self.problem.title

    @property
    def detail(self) -> str:
        return self.problem.detail

    @property
    def type(self) -> str:
        return self.problem.type

    @property
    def instance(self) -> str:
        return self.problem.instance

    def with_operation(self, operation: str) -> "APIError":
        """Copy of this error prefixed with an operation name"""
        return APIError(self.problem, operation=operation)

    def matches(self, target: "APIError | ErrorCondition") -> bool:
        """Check whether this error corresponds to a sentinel or another APIError"""
        if isinstance(target, ErrorCondition):
            if self.status != target.status:
                return False
            return target.error_code is None or self.error_code == target.error_code
        if isinstance(target, APIError):
            if target is self:
                return True
            if self.status != target.status:
                return False
            return self.problem.model_dump() == target.problem.model_dump()
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash((self.status, self.error_code, self.title))


__all__ = [
    "EdgeWorkersError",
    "ConfigurationError",
    "StructValidationError",
    "RequestFailedError",
    "AdditionalDetail",
    "ProblemDetails",
    "ErrorCondition",
    "NOT_FOUND",
    "VERSION_ALREADY_DEACTIVATED",
    "APIError",
]
