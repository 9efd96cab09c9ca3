"""Tests for Reports"""

import pytest

from edgeworkers import EventHandler, GetReportRequest, ReportStatus, StructValidationError

REPORT = """
{
    "reportId": 2,
    "name": "Overall summary",
    "description": "This report contains an overview of other reports.",
    "start": "2021-12-04T00:00:00Z",
    "end": "2022-01-01T15:00:00Z",
    "data": [
        {
            "edgeWorkerId": 37017,
            "data": {
                "onClientRequest": [
                    {
                        "startDateTime": "2021-12-04T00:00:00Z",
                        "edgeWorkerVersion": "10.18",
                        "execDuration": {"avg": 654, "min": 554, "max": 754},
                        "invocations": 20
                    }
                ],
                "init": [
                    {
                        "startDateTime": "2021-12-04T00:00:00Z",
                        "edgeWorkerVersion": "10.18",
                        "initDuration": {"avg": 453, "min": 454, "max": 455},
                        "invocations": 1
                    }
                ]
            }
        }
    ]
}"""


class TestGetReport:
    """Tests for get_report"""

    @pytest.mark.asyncio
    async def test_get_report(self, make_client, mock_api):
        """Test report query and nested statistics"""
        api = mock_api(200, REPORT)
        client = make_client(api)

        result = await client.get_report(
            GetReportRequest(
                report_id=2, start="2021-12-04T00:00:00Z", end="2022-01-01T15:00:00Z", edgeworker="37017"
            )
        )

        assert api.request.url.path == "/edgeworkers/v1/reports/2"
        assert dict(api.request.url.params) == {
            "edgeWorker": "37017",
            "end": "2022-01-01T15:00:00Z",
            "start": "2021-12-04T00:00:00Z",
        }
        handler = result.data[0].data.on_client_request[0]
        assert handler.edgeworker_version == "10.18"
        assert handler.exec_duration.avg == 654
        assert result.data[0].data.init[0].init_duration.max == 455
        assert result.data[0].data.response_provider == []

    @pytest.mark.asyncio
    async def test_get_report_with_filters(self, make_client, mock_api):
        """Test status and event handler filters"""
        api = mock_api(200, REPORT)
        client = make_client(api)

        await client.get_report(
            GetReportRequest(
                report_id=2,
                start="2021-12-04T00:00:00.000Z",
                edgeworker="37017",
                status=ReportStatus.SUCCESS,
                event_handler=EventHandler.ON_CLIENT_REQUEST,
            )
        )

        params = api.request.url.params
        assert params["status"] == "success"
        assert params["eventHandler"] == "onClientRequest"
        assert "end" not in params

    @pytest.mark.asyncio
    async def test_get_summary_report(self, make_client, mock_api):
        """Test the summary report is report 1"""
        api = mock_api(200, REPORT)
        client = make_client(api)

        await client.get_summary_report(GetReportRequest(start="2021-12-04T00:00:00Z", edgeworker="37017"))

        assert api.request.url.path == "/edgeworkers/v1/reports/1"

    @pytest.mark.asyncio
    async def test_get_report_validation(self, make_client, mock_api):
        """Test dates and filter values are checked"""
        api = mock_api(200, REPORT)
        client = make_client(api)

        with pytest.raises(StructValidationError) as exc_info:
            await client.get_report(
                GetReportRequest(
                    report_id=2,
                    start="2021-12-04",
                    end="yesterday",
                    edgeworker="37017",
                    status="unknown",
                    event_handler="",
                )
            )

        errors = exc_info.value.errors
        assert errors["start"] == "value '2021-12-04' is invalid. It must have format 'YYYY-MM-DDTHH:MM:SS(.fff)Z'"
        assert errors["end"] == "value 'yesterday' is invalid. It must have format 'YYYY-MM-DDTHH:MM:SS(.fff)Z'"
        assert errors["status"].startswith("Input should be 'success', 'genericError'")
        assert errors["event_handler"].startswith("Input should be 'onClientRequest', 'onOriginRequest'")
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_get_report_fraction_digits(self, make_client, mock_api):
        """Test fractional seconds are accepted up to nanoseconds"""
        api = mock_api(200, REPORT)
        client = make_client(api)

        await client.get_report(
            GetReportRequest(
                report_id=2,
                start="2021-12-04T00:00:00.123456789Z",
                end="2022-01-01T15:00:00.5Z",
                edgeworker="37017",
            )
        )

        assert api.request.url.params["start"] == "2021-12-04T00:00:00.123456789Z"
        assert api.request.url.params["end"] == "2022-01-01T15:00:00.5Z"

    @pytest.mark.asyncio
    async def test_get_report_rejects_bad_dates(self, make_client, mock_api):
        """Test too many fraction digits and impossible dates fail"""
        api = mock_api(200, REPORT)
        client = make_client(api)

        with pytest.raises(StructValidationError) as exc_info:
            await client.get_report(
                GetReportRequest(
                    report_id=2,
                    start="2021-12-04T00:00:00.1234567891Z",
                    end="2021-02-30T00:00:00Z",
                    edgeworker="37017",
                )
            )

        assert set(exc_info.value.errors) == {"start", "end"}
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_get_report_missing_required(self, make_client, mock_api):
        """Test report ID, start and EdgeWorker are required"""
        client = make_client(mock_api(200, REPORT))

        with pytest.raises(StructValidationError) as exc_info:
            await client.get_report(GetReportRequest())

        assert exc_info.value.errors == {
            "report_id": "Input should be greater than 0",
            "start": "String should have at least 1 character",
            "edgeworker": "String should have at least 1 character",
        }


class TestListReports:
    """Tests for list_reports"""

    @pytest.mark.asyncio
    async def test_list_reports(self, make_client, mock_api):
        """Test available reports are listed"""
        api = mock_api(
            200,
            """
{
    "reports": [
        {"reportId": 1, "name": "Overall summary", "description": "Overview", "unavailable": false},
        {"reportId": 2, "name": "Initialization and execution times by EdgeWorker ID", "description": "Times", "unavailable": true}
    ]
}""",
        )
        client = make_client(api)

        result = await client.list_reports()

        assert api.path == "/edgeworkers/v1/reports"
        assert [r.report_id for r in result.reports] == [1, 2]
        assert result.reports[1].unavailable is True
