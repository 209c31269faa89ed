"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

Tests for report, secure token and bundle validation operations.
"""

import pytest

from edgeworkers.exceptions import StructValidationError
from edgeworkers.sdk.activations import ActivationNetwork
from edgeworkers.sdk.adapters.base import SDKResponse
from edgeworkers.sdk.models import Bundle
from edgeworkers.sdk.reports import (
    EventHandler,
    GetReportRequest,
    GetSummaryReportRequest,
    ReportOperations,
    ReportStatus,
)
from edgeworkers.sdk.secure_tokens import (
    ACL_OR_URL_MESSAGE,
    HOSTNAME_OR_PROPERTY_MESSAGE,
    CreateSecureTokenRequest,
    SecureTokenOperations,
)
from edgeworkers.sdk.validations import ValidateBundleRequest, ValidationOperations

SUMMARY = {
    "reportId": 1,
    "name": "Overall summary",
    "description": "Overall summary of EdgeWorker execution",
    "start": "2021-12-04T00:00:00Z",
    "end": "2021-12-04T12:00:00Z",
    "data": {
        "memory": {"avg": 1.5, "min": 1, "max": 3.25},
        "successes": {"total": 100},
        "initDuration": {"avg": 0.5, "min": 0.1, "max": 2},
        "execDuration": {"avg": 2.5, "min": 1, "max": 9},
        "errors": {"total": 3},
        "invocations": {"total": 103},
    },
}


class TestReports:
    @pytest.mark.asyncio
    async def test_get_summary_report(self, mock_adapter):
        mock_adapter.add_response("GET", "/edgeworkers/v1/reports/1", SDKResponse(status_code=200, body=SUMMARY))

        report = await ReportOperations(mock_adapter).get_summary_report(GetSummaryReportRequest(
            start="2021-12-04T00:00:00Z",
            end="2021-12-04T12:00:00Z",
            edgeworker="42",
            status=ReportStatus.SUCCESS,
            event_handler=EventHandler.ON_CLIENT_REQUEST,
        ))

        assert report.data.memory.max == 3.25
        assert report.data.memory.min == 1.0
        assert isinstance(report.data.memory.min, float)
        assert report.data.invocations.total == 103
        assert mock_adapter.sent_requests[0].params == {
            "edgeWorker": "42",
            "start": "2021-12-04T00:00:00Z",
            "end": "2021-12-04T12:00:00Z",
            "status": "success",
            "eventHandler": "onClientRequest",
        }

    @pytest.mark.asyncio
    async def test_summary_report_minimal_query(self, mock_adapter):
        mock_adapter.add_response("GET", "/edgeworkers/v1/reports/1", SDKResponse(status_code=200, body=SUMMARY))
        await ReportOperations(mock_adapter).get_summary_report(
            GetSummaryReportRequest(start="2021-12-04T00:00:00Z", edgeworker="42")
        )
        assert mock_adapter.sent_requests[0].params == {"edgeWorker": "42", "start": "2021-12-04T00:00:00Z"}

    @pytest.mark.asyncio
    async def test_summary_report_validation(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await ReportOperations(mock_adapter).get_summary_report(GetSummaryReportRequest(
                start="2021-12-04", end="tomorrow", status="broken", event_handler="onSomething",
            ))

        errors = exc_info.value.errors
        assert errors["start"] == (
            "value '2021-12-04' is invalid. It must have format 'YYYY-MM-DDTHH:MM:SS.sssZ'"
        )
        assert errors["end"].startswith("value 'tomorrow' is invalid")
        assert errors["edgeworker"] == "cannot be blank"
        assert errors["status"].startswith("value 'broken' is invalid. Must be one of: 'success', ")
        assert errors["event_handler"].startswith("value 'onSomething' is invalid")
        assert mock_adapter.sent_requests == []

    @pytest.mark.asyncio
    async def test_get_report(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/reports/3",
            SDKResponse(status_code=200, body={
                "reportId": 3,
                "name": "Execution time",
                "start": "2021-12-04T00:00:00Z",
                "data": [{
                    "edgeWorkerId": 42,
                    "data": {
                        "onClientRequest": [{
                            "startDateTime": "2021-12-04T00:00:00Z",
                            "edgeWorkerVersion": "1.0",
                            "execDuration": {"avg": 1.2, "min": 0.4, "max": 5},
                            "invocations": 10,
                        }],
                        "init": [{
                            "startDateTime": "2021-12-04T00:00:00Z",
                            "edgeWorkerVersion": "1.0",
                            "initDuration": {"avg": 3, "min": 3, "max": 3},
                            "invocations": 1,
                        }],
                    },
                }],
            }),
        )

        report = await ReportOperations(mock_adapter).get_report(
            GetReportRequest(start="2021-12-04T00:00:00Z", edgeworker="42", report_id=3)
        )

        entry = report.data[0]
        assert entry.edgeworker_id == 42
        assert entry.data.on_client_request[0].exec_duration.max == 5.0
        assert entry.data.init[0].init_duration.avg == 3.0
        assert entry.data.response_provider == []

    @pytest.mark.asyncio
    async def test_get_report_requires_id(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await ReportOperations(mock_adapter).get_report(
                GetReportRequest(start="2021-12-04T00:00:00Z", edgeworker="42")
            )
        assert exc_info.value.errors == {"report_id": "cannot be blank"}

    @pytest.mark.asyncio
    async def test_list_reports(self, mock_adapter):
        mock_adapter.add_response(
            "GET", "/edgeworkers/v1/reports",
            SDKResponse(status_code=200, body={"reports": [
                {"reportId": 1, "name": "Overall summary", "description": "", "unavailable": False},
                {"reportId": 5, "name": "Memory usage", "description": "", "unavailable": True},
            ]}),
        )
        result = await ReportOperations(mock_adapter).list_reports()
        assert [r.report_id for r in result.reports] == [1, 5]
        assert result.reports[1].unavailable is True


class TestSecureTokens:
    @pytest.mark.asyncio
    async def test_create_secure_token(self, mock_adapter):
        mock_adapter.add_response(
            "POST", "/edgeworkers/v1/secure-token",
            SDKResponse(status_code=201, body={"akamaiEwTrace": "st=1;exp=2;acl=/*~hmac=abc"}),
        )

        result = await SecureTokenOperations(mock_adapter).create_secure_token(
            CreateSecureTokenRequest(hostname="www.example.com", expiry=60, network=ActivationNetwork.STAGING)
        )

        assert result.akamai_ew_trace.startswith("st=1")
        assert mock_adapter.sent_requests[0].body == {
            "expiry": 60, "hostname": "www.example.com", "network": "STAGING",
        }

    def test_requires_hostname_or_property(self):
        errors = CreateSecureTokenRequest().validate()
        assert errors == {
            "hostname": HOSTNAME_OR_PROPERTY_MESSAGE,
            "property_id": HOSTNAME_OR_PROPERTY_MESSAGE,
        }

    def test_acl_and_url_exclusive(self):
        errors = CreateSecureTokenRequest(property_id="1", acl="/*", url="/a").validate()
        assert errors == {"acl": ACL_OR_URL_MESSAGE, "url": ACL_OR_URL_MESSAGE}

    @pytest.mark.parametrize("expiry, message", [
        (721, "must be no greater than 720"),
        (-5, "must be no less than 1"),
    ])
    def test_expiry_bounds(self, expiry, message):
        errors = CreateSecureTokenRequest(hostname="h", expiry=expiry).validate()
        assert errors == {"expiry": message}

    def test_invalid_network(self):
        errors = CreateSecureTokenRequest(hostname="h", network="QA").validate()
        assert errors["network"] == "value 'QA' is invalid. Must be one of: 'STAGING' or 'PRODUCTION'"

    @pytest.mark.asyncio
    async def test_invalid_request_not_sent(self, mock_adapter):
        with pytest.raises(StructValidationError):
            await SecureTokenOperations(mock_adapter).create_secure_token(CreateSecureTokenRequest())
        assert mock_adapter.sent_requests == []


class TestBundleValidation:
    @pytest.mark.asyncio
    async def test_validate_bundle(self, mock_adapter):
        mock_adapter.add_response(
            "POST", "/edgeworkers/v1/validations",
            SDKResponse(status_code=200, body={
                "errors": [],
                "warnings": [{"type": "ACCESS_TOKEN_EXPIRING_SOON", "message": "token expires soon"}],
            }),
        )

        result = await ValidationOperations(mock_adapter).validate_bundle(
            ValidateBundleRequest(bundle=Bundle(b"tgz"))
        )

        assert result.errors == []
        assert result.warnings[0].type == "ACCESS_TOKEN_EXPIRING_SOON"
        sent = mock_adapter.sent_requests[0]
        assert sent.content == b"tgz"
        assert sent.headers == {"Content-Type": "application/gzip"}

    @pytest.mark.asyncio
    async def test_bundle_required(self, mock_adapter):
        with pytest.raises(StructValidationError) as exc_info:
            await ValidationOperations(mock_adapter).validate_bundle(ValidateBundleRequest())
        assert exc_info.value.errors == {"bundle": "cannot be blank"}
