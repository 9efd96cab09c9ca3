"""
EdgeWorkers Services

One module per API resource: request types, response models and the
operations mixed into EdgeWorkersClient.
"""

from .activations import (
    Activation,
    ActivationNetwork,
    ActivationsMixin,
    CancelActivationRequest,
    CreateActivationRequest,
    GetActivationRequest,
    ListActivationsRequest,
    ListActivationsResponse,
)
from .contracts import ContractsMixin, ListContractsResponse
from .deactivations import (
    DeactivateVersionRequest,
    Deactivation,
    DeactivationsMixin,
    GetDeactivationRequest,
    ListDeactivationsRequest,
    ListDeactivationsResponse,
)
from .edgekv_access_tokens import (
    CreateEdgeKVAccessTokenRequest,
    DeleteEdgeKVAccessTokenRequest,
    DeleteEdgeKVAccessTokenResponse,
    EdgeKVAccessToken,
    EdgeKVAccessTokenDetails,
    EdgeKVAccessTokensMixin,
    GetEdgeKVAccessTokenRequest,
    ListEdgeKVAccessTokensRequest,
    ListEdgeKVAccessTokensResponse,
    Permission,
)
from .edgekv_initialize import EdgeKVInitializationStatus, EdgeKVInitializeMixin
from .edgekv_items import (
    DeleteItemRequest,
    EdgeKVItemsMixin,
    GetItemRequest,
    ItemsRequestParams,
    ListItemsRequest,
    UpsertItemRequest,
)
from .edgekv_namespaces import (
    CancelScheduledNamespaceDeleteRequest,
    CreateEdgeKVNamespaceRequest,
    DeleteEdgeKVNamespaceRequest,
    DeleteEdgeKVNamespaceResponse,
    EdgeKVNamespacesMixin,
    EdgeKVNetwork,
    GetEdgeKVNamespaceRequest,
    GetScheduledDeleteTimeRequest,
    ListEdgeKVNamespacesRequest,
    ListEdgeKVNamespacesResponse,
    ListGroupsWithinNamespaceRequest,
    Namespace,
    RescheduleNamespaceDeleteRequest,
    ScheduledDeleteTime,
    UpdateEdgeKVNamespaceRequest,
)
from .edgeworker_ids import (
    CloneEdgeWorkerIDRequest,
    CreateEdgeWorkerIDRequest,
    DeleteEdgeWorkerIDRequest,
    EdgeWorkerID,
    EdgeWorkerIDsMixin,
    GetEdgeWorkerIDRequest,
    ListEdgeWorkersIDRequest,
    ListEdgeWorkersIDResponse,
    UpdateEdgeWorkerIDRequest,
)
from .edgeworker_versions import (
    CreateEdgeWorkerVersionRequest,
    DeleteEdgeWorkerVersionRequest,
    EdgeWorkerVersion,
    EdgeWorkerVersionsMixin,
    GetEdgeWorkerVersionContentRequest,
    GetEdgeWorkerVersionRequest,
    ListEdgeWorkerVersionsRequest,
    ListEdgeWorkerVersionsResponse,
)
from .permission_groups import (
    GetPermissionGroupRequest,
    ListPermissionGroupsResponse,
    PermissionGroup,
    PermissionGroupsMixin,
)
from .properties import ListPropertiesRequest, ListPropertiesResponse, PropertiesMixin, Property
from .reports import (
    EventHandler,
    GetReportRequest,
    GetReportResponse,
    ListReportsResponse,
    ReportStatus,
    ReportSummary,
    ReportsMixin,
)
from .resource_tiers import (
    EdgeWorkerLimit,
    GetResourceTierRequest,
    ListResourceTiersRequest,
    ListResourceTiersResponse,
    ResourceTier,
    ResourceTiersMixin,
)
from .secure_tokens import CreateSecureTokenRequest, CreateSecureTokenResponse, SecureTokensMixin
from .validations import ValidateBundleRequest, ValidateBundleResponse, ValidationIssue, ValidationsMixin

__all__ = [
    # Mixins
    "ActivationsMixin",
    "ContractsMixin",
    "DeactivationsMixin",
    "EdgeKVAccessTokensMixin",
    "EdgeKVInitializeMixin",
    "EdgeKVItemsMixin",
    "EdgeKVNamespacesMixin",
    "EdgeWorkerIDsMixin",
    "EdgeWorkerVersionsMixin",
    "PermissionGroupsMixin",
    "PropertiesMixin",
    "ReportsMixin",
    "ResourceTiersMixin",
    "SecureTokensMixin",
    "ValidationsMixin",
    # Activations
    "Activation",
    "ActivationNetwork",
    "CancelActivationRequest",
    "CreateActivationRequest",
    "GetActivationRequest",
    "ListActivationsRequest",
    "ListActivationsResponse",
    # Contracts
    "ListContractsResponse",
    # Deactivations
    "DeactivateVersionRequest",
    "Deactivation",
    "GetDeactivationRequest",
    "ListDeactivationsRequest",
    "ListDeactivationsResponse",
    # EdgeKV
    "CancelScheduledNamespaceDeleteRequest",
    "CreateEdgeKVAccessTokenRequest",
    "CreateEdgeKVNamespaceRequest",
    "DeleteEdgeKVAccessTokenRequest",
    "DeleteEdgeKVAccessTokenResponse",
    "DeleteEdgeKVNamespaceRequest",
    "DeleteEdgeKVNamespaceResponse",
    "DeleteItemRequest",
    "EdgeKVAccessToken",
    "EdgeKVAccessTokenDetails",
    "EdgeKVInitializationStatus",
    "EdgeKVNetwork",
    "GetEdgeKVAccessTokenRequest",
    "GetEdgeKVNamespaceRequest",
    "GetItemRequest",
    "GetScheduledDeleteTimeRequest",
    "ItemsRequestParams",
    "ListEdgeKVAccessTokensRequest",
    "ListEdgeKVAccessTokensResponse",
    "ListEdgeKVNamespacesRequest",
    "ListEdgeKVNamespacesResponse",
    "ListGroupsWithinNamespaceRequest",
    "ListItemsRequest",
    "Namespace",
    "Permission",
    "RescheduleNamespaceDeleteRequest",
    "ScheduledDeleteTime",
    "UpdateEdgeKVNamespaceRequest",
    "UpsertItemRequest",
    # EdgeWorker IDs and versions
    "CloneEdgeWorkerIDRequest",
    "CreateEdgeWorkerIDRequest",
    "CreateEdgeWorkerVersionRequest",
    "DeleteEdgeWorkerIDRequest",
    "DeleteEdgeWorkerVersionRequest",
    "EdgeWorkerID",
    "EdgeWorkerVersion",
    "GetEdgeWorkerIDRequest",
    "GetEdgeWorkerVersionContentRequest",
    "GetEdgeWorkerVersionRequest",
    "ListEdgeWorkerVersionsRequest",
    "ListEdgeWorkerVersionsResponse",
    "ListEdgeWorkersIDRequest",
    "ListEdgeWorkersIDResponse",
    "UpdateEdgeWorkerIDRequest",
    # Permission groups, properties, resource tiers
    "EdgeWorkerLimit",
    "GetPermissionGroupRequest",
    "GetResourceTierRequest",
    "ListPermissionGroupsResponse",
    "ListPropertiesRequest",
    "ListPropertiesResponse",
    "ListResourceTiersRequest",
    "ListResourceTiersResponse",
    "PermissionGroup",
    "Property",
    "ResourceTier",
    # Reports
    "EventHandler",
    "GetReportRequest",
    "GetReportResponse",
    "ListReportsResponse",
    "ReportStatus",
    "ReportSummary",
    # Secure tokens and validations
    "CreateSecureTokenRequest",
    "CreateSecureTokenResponse",
    "ValidateBundleRequest",
    "ValidateBundleResponse",
    "ValidationIssue",
]
