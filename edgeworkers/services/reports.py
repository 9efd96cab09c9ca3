"""
Reports

Execution reports of EdgeWorkers over a time window.
"""

import re
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ..core import validation as v
from .base import ServiceMixin

logger = structlog.get_logger()

SUMMARY_REPORT_ID = 1
DATE_LAYOUT = "YYYY-MM-DDTHH:MM:SS(.fff)Z"
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,9})?Z")
_DATETIME = TypeAdapter(datetime)


class ReportStatus(str, Enum):
    """Execution status filter"""

    SUCCESS = "success"
    GENERIC_ERROR = "genericError"
    UNKNOWN_EDGEWORKER_ID = "unknownEdgeWorkerId"
    UNIMPLEMENTED_EVENT_HANDLER = "unimplementedEventHandler"
    RUNTIME_ERROR = "runtimeError"
    EXECUTION_ERROR = "executionError"
    TIMEOUT_ERROR = "timeoutError"
    RESOURCE_LIMIT_HIT = "resourceLimitHit"
    CPU_TIMEOUT_ERROR = "cpuTimeoutError"
    WALL_TIMEOUT_ERROR = "wallTimeoutError"
    INIT_CPU_TIMEOUT_ERROR = "initCpuTimeoutError"
    INIT_WALL_TIMEOUT_ERROR = "initWallTimeoutError"


class EventHandler(str, Enum):
    """Event handler filter"""

    ON_CLIENT_REQUEST = "onClientRequest"
    ON_ORIGIN_REQUEST = "onOriginRequest"
    ON_ORIGIN_RESPONSE = "onOriginResponse"
    ON_CLIENT_RESPONSE = "onClientResponse"
    RESPONSE_PROVIDER = "responseProvider"


def _is_date(value: str) -> bool:
    if not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        _DATETIME.validate_python(value[:19])
    except ValidationError:
        return False
    return True


# ============================================
# Requests
# ============================================


@dataclass
class GetReportRequest:
    """
    Report query

    start and end use the YYYY-MM-DDTHH:MM:SS(.fff)Z layout; end defaults to now.
    """

    report_id: v.ID = 0
    start: v.Text = ""
    end: str = ""
    edgeworker: v.Text = ""
    status: ReportStatus | None = None
    event_handler: EventHandler | None = None

    @field_validator("start", "end")
    @classmethod
    def check_date(cls, value: str) -> str:
        if value and not _is_date(value):
            raise PydanticCustomError(
                "date_format",
                "value '{value}' is invalid. It must have format '{layout}'",
                {"value": value, "layout": DATE_LAYOUT},
            )
        return value

    def query(self) -> dict[str, str]:
        query = {"edgeWorker": self.edgeworker}
        if self.end:
            query["end"] = self.end
        if self.event_handler is not None:
            query["eventHandler"] = EventHandler(self.event_handler).value
        query["start"] = self.start
        if self.status is not None:
            query["status"] = ReportStatus(self.status).value
        return query


# ============================================
# Responses
# ============================================


class Duration(BaseModel):
    avg: int = 0
    min: int = 0
    max: int = 0


class OnRequestAndResponse(BaseModel):
    """Execution statistics of one event handler"""

    model_config = ConfigDict(populate_by_name=True)

    start_date_time: str = Field(default="", alias="startDateTime")
    edgeworker_version: str = Field(default="", alias="edgeWorkerVersion")
    exec_duration: Duration = Field(default_factory=Duration, alias="execDuration")
    invocations: int = 0


class InitObject(BaseModel):
    """Initialization statistics"""

    model_config = ConfigDict(populate_by_name=True)

    start_date_time: str = Field(default="", alias="startDateTime")
    edgeworker_version: str = Field(default="", alias="edgeWorkerVersion")
    init_duration: Duration = Field(default_factory=Duration, alias="initDuration")
    invocations: int = 0


class Data(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    on_client_request: list[OnRequestAndResponse] = Field(default_factory=list, alias="onClientRequest")
    on_origin_request: list[OnRequestAndResponse] = Field(default_factory=list, alias="onOriginRequest")
    on_origin_response: list[OnRequestAndResponse] = Field(default_factory=list, alias="onOriginResponse")
    on_client_response: list[OnRequestAndResponse] = Field(default_factory=list, alias="onClientResponse")
    response_provider: list[OnRequestAndResponse] = Field(default_factory=list, alias="responseProvider")
    init: list[InitObject] = Field(default_factory=list)


class ReportData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    edgeworker_id: int = Field(default=0, alias="edgeWorkerId")
    data: Data = Field(default_factory=Data)


class GetReportResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    report_id: int = Field(default=0, alias="reportId")
    name: str = ""
    description: str = ""
    start: str = ""
    end: str = ""
    data: list[ReportData] = Field(default_factory=list)


class ReportSummary(BaseModel):
    """Report as listed"""

    model_config = ConfigDict(populate_by_name=True)

    report_id: int = Field(default=0, alias="reportId")
    name: str = ""
    description: str = ""
    unavailable: bool = False


class ListReportsResponse(BaseModel):
    reports: list[ReportSummary] = Field(default_factory=list)


# ============================================
# Operations
# ============================================


class ReportsMixin(ServiceMixin):
    async def get_report(self, params: GetReportRequest) -> GetReportResponse:
        """Get an EdgeWorker report"""
        operation = "get an EdgeWorker report"
        logger.debug("get_report", report_id=params.report_id, edgeworker=params.edgeworker)
        params = self._validate(operation, params)

        response = await self._call(
            operation,
            "GET",
            f"/edgeworkers/v1/reports/{params.report_id}",
            params=params.query(),
        )
        return self._decode(operation, GetReportResponse, response)

    async def get_summary_report(self, params: GetReportRequest) -> GetReportResponse:
        """Get the overall summary report, whatever report_id is set"""
        return await self.get_report(replace(params, report_id=SUMMARY_REPORT_ID))

    async def list_reports(self) -> ListReportsResponse:
        """List available reports"""
        operation = "get EdgeWorker reports"
        logger.debug("list_reports")

        response = await self._call(operation, "GET", "/edgeworkers/v1/reports")
        return self._decode(operation, ListReportsResponse, response)
