"""
EdgeWorkers Client - Python SDK for the EdgeWorkers and EdgeKV APIs

Example:
    >>> from edgeworkers import EdgeWorkersClient, ListActivationsRequest
    >>>
    >>> async with EdgeWorkersClient.from_edgerc(section="default") as client:
    ...     result = await client.list_activations(ListActivationsRequest(edgeworker_id=42))
    ...     print(f"Found {len(result.activations)} activations")
"""

from .auth import EdgeGridAuth
from .client import EdgeWorkersClient
from .config import EdgeGridConfig, Settings, get_settings
from .core.exceptions import (
    NOT_FOUND,
    VERSION_ALREADY_DEACTIVATED,
    APIError,
    ConfigurationError,
    EdgeWorkersError,
    ErrorCondition,
    ProblemDetails,
    RequestFailedError,
    StructValidationError,
)
from .log import configure_logging
from .services import *  # noqa: F403
from .services import __all__ as _services_all
from .session import Session

__version__ = "0.1.0"
__all__ = [
    # Client
    "EdgeWorkersClient",
    "Session",
    "EdgeGridAuth",
    # Config
    "EdgeGridConfig",
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "EdgeWorkersError",
    "ConfigurationError",
    "StructValidationError",
    "RequestFailedError",
    "APIError",
    "ProblemDetails",
    "ErrorCondition",
    "NOT_FOUND",
    "VERSION_ALREADY_DEACTIVATED",
    *_services_all,
]
