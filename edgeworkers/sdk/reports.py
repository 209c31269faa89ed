"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Report Operations.

Reports aggregate EdgeWorker execution metrics over a time window. Report 1
is the overall summary; the others break metrics down per event handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.validation import ValidationErrors, one_of, report_date, required

GET_SUMMARY_REPORT = "get summary report"
GET_REPORT = "get an EdgeWorker report"
LIST_REPORTS = "get EdgeWorker reports"

SUMMARY_REPORT_ID = 1


class ReportStatus(str, Enum):
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
    ON_CLIENT_REQUEST = "onClientRequest"
    ON_ORIGIN_REQUEST = "onOriginRequest"
    ON_ORIGIN_RESPONSE = "onOriginResponse"
    ON_CLIENT_RESPONSE = "onClientResponse"
    RESPONSE_PROVIDER = "responseProvider"


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class Duration(WireModel):
    avg: float = wire("avg", 0.0)
    min: float = wire("min", 0.0)
    max: float = wire("max", 0.0)


@dataclass
class Total(WireModel):
    total: int = wire("total", 0)


@dataclass
class SummaryData(WireModel):
    memory: Optional[Duration] = wire("memory")
    successes: Optional[Total] = wire("successes")
    init_duration: Optional[Duration] = wire("initDuration")
    exec_duration: Optional[Duration] = wire("execDuration")
    errors: Optional[Total] = wire("errors")
    invocations: Optional[Total] = wire("invocations")


@dataclass
class GetSummaryReportResponse(WireModel):
    report_id: int = wire("reportId", 0)
    name: str = wire("name", "")
    description: str = wire("description", "")
    start: str = wire("start", "")
    end: str = wire("end", "")
    data: SummaryData = wire("data", default_factory=SummaryData)


@dataclass
class OnRequestAndResponse(WireModel):
    start_date_time: str = wire("startDateTime", "")
    edgeworker_version: str = wire("edgeWorkerVersion", "")
    exec_duration: Duration = wire("execDuration", default_factory=Duration)
    invocations: int = wire("invocations", 0)


@dataclass
class InitObject(WireModel):
    start_date_time: str = wire("startDateTime", "")
    edgeworker_version: str = wire("edgeWorkerVersion", "")
    init_duration: Duration = wire("initDuration", default_factory=Duration)
    invocations: int = wire("invocations", 0)


@dataclass
class Data(WireModel):
    on_client_request: List[OnRequestAndResponse] = wire("onClientRequest", default_factory=list)
    on_origin_request: List[OnRequestAndResponse] = wire("onOriginRequest", default_factory=list)
    on_origin_response: List[OnRequestAndResponse] = wire("onOriginResponse", default_factory=list)
    on_client_response: List[OnRequestAndResponse] = wire("onClientResponse", default_factory=list)
    response_provider: List[OnRequestAndResponse] = wire("responseProvider", default_factory=list)
    init: List[InitObject] = wire("init", default_factory=list)


@dataclass
class ReportData(WireModel):
    edgeworker_id: int = wire("edgeWorkerId", 0)
    data: Data = wire("data", default_factory=Data)


@dataclass
class GetReportResponse(WireModel):
    report_id: int = wire("reportId", 0)
    name: str = wire("name", "")
    description: str = wire("description", "")
    start: str = wire("start", "")
    end: str = wire("end", "")
    data: List[ReportData] = wire("data", default_factory=list)


@dataclass
class ReportResponse(WireModel):
    report_id: int = wire("reportId", 0)
    name: str = wire("name", "")
    description: str = wire("description", "")
    unavailable: bool = wire("unavailable", False)


@dataclass
class ListReportsResponse(WireModel):
    reports: List[ReportResponse] = wire("reports", default_factory=list)


@dataclass
class GetSummaryReportRequest:
    """Time window and filters for a report.

    ``start`` and ``end`` are UTC timestamps like ``2021-12-04T00:00:00Z``.
    ``status`` and ``event_handler`` narrow the report when set.
    """

    start: str = ""
    end: str = ""
    edgeworker: str = ""
    status: Optional[ReportStatus] = None
    event_handler: Optional[EventHandler] = None

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.first("start", required(self.start), report_date(self.start))
        errors.add("end", report_date(self.end))
        errors.add("edgeworker", required(self.edgeworker))
        if self.status is not None:
            errors.first("status", required(self.status), one_of(self.status, list(ReportStatus)))
        if self.event_handler is not None:
            errors.first(
                "event_handler",
                required(self.event_handler),
                one_of(self.event_handler, list(EventHandler)),
            )
        return errors

    def query(self) -> Dict[str, str]:
        params = {"edgeWorker": self.edgeworker, "start": self.start}
        if self.end:
            params["end"] = self.end
        if self.status is not None:
            params["status"] = getattr(self.status, "value", self.status)
        if self.event_handler is not None:
            params["eventHandler"] = getattr(self.event_handler, "value", self.event_handler)
        return params


@dataclass
class GetReportRequest(GetSummaryReportRequest):
    report_id: int = 0

    def validate(self) -> ValidationErrors:
        errors = super().validate()
        errors.add("report_id", required(self.report_id))
        return errors


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class ReportOperations(ResourceOperations):
    """EdgeWorker execution reports."""

    async def get_summary_report(self, request: GetSummaryReportRequest) -> GetSummaryReportResponse:
        """Get the overall summary report for an EdgeWorker."""
        self._validate(GET_SUMMARY_REPORT, request)
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/reports/{SUMMARY_REPORT_ID}",
            params=request.query(),
        )
        resp = await self._execute(GET_SUMMARY_REPORT, req, expected_status=200)
        return self._decode(GET_SUMMARY_REPORT, resp, GetSummaryReportResponse)

    async def get_report(self, request: GetReportRequest) -> GetReportResponse:
        """Get a per event handler report.

        Args:
            request: Report id, EdgeWorker id and time window.

        Returns:
            GetReportResponse with one entry per EdgeWorker.
        """
        self._validate(GET_REPORT, request)
        req = SDKRequest(
            method="GET",
            path=f"/edgeworkers/v1/reports/{request.report_id}",
            params=request.query(),
        )
        resp = await self._execute(GET_REPORT, req, expected_status=200)
        return self._decode(GET_REPORT, resp, GetReportResponse)

    async def list_reports(self) -> ListReportsResponse:
        req = SDKRequest(method="GET", path="/edgeworkers/v1/reports")
        resp = await self._execute(LIST_REPORTS, req, expected_status=200)
        return self._decode(LIST_REPORTS, resp, ListReportsResponse)
