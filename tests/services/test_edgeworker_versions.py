"""Tests for EdgeWorker Versions"""

import gzip

import pytest

from edgeworkers import (
    CreateEdgeWorkerVersionRequest,
    DeleteEdgeWorkerVersionRequest,
    GetEdgeWorkerVersionContentRequest,
    GetEdgeWorkerVersionRequest,
    ListEdgeWorkerVersionsRequest,
    StructValidationError,
)

VERSION = """
{
    "edgeWorkerId": 42,
    "version": "2",
    "accountId": "B-M-1KQK3WU",
    "checksum": "868e2a9e3b1b9d9d5d5a5f8f2d7a1c3b",
    "sequenceNumber": 2,
    "createdBy": "jdoe",
    "createdTime": "2018-07-09T09:03:28Z"
}"""

BUNDLE = gzip.compress(b"main.js bundle.json")


class TestEdgeWorkerVersions:
    """Tests for version operations"""

    @pytest.mark.asyncio
    async def test_get_version(self, make_client, mock_api):
        """Test getting one version"""
        api = mock_api(200, VERSION)
        client = make_client(api)

        result = await client.get_edgeworker_version(GetEdgeWorkerVersionRequest(edgeworker_id=42, version="2"))

        assert api.path == "/edgeworkers/v1/ids/42/versions/2"
        assert result.sequence_number == 2

    @pytest.mark.asyncio
    async def test_get_version_validation(self, make_client, mock_api):
        """Test ID and version are required"""
        client = make_client(mock_api(200, VERSION))

        with pytest.raises(StructValidationError) as exc_info:
            await client.get_edgeworker_version(GetEdgeWorkerVersionRequest(edgeworker_id=42))

        assert exc_info.value.errors == {"version": "String should have at least 1 character"}

    @pytest.mark.asyncio
    async def test_list_versions(self, make_client, mock_api):
        """Test versions are decoded"""
        api = mock_api(200, f'{{"versions": [{VERSION}]}}')
        client = make_client(api)

        result = await client.list_edgeworker_versions(ListEdgeWorkerVersionsRequest(edgeworker_id=42))

        assert api.path == "/edgeworkers/v1/ids/42/versions"
        assert [v.version for v in result.edgeworker_versions] == ["2"]

    @pytest.mark.asyncio
    async def test_get_version_content(self, make_client, mock_api):
        """Test bundle is downloaded as gzip bytes"""
        api = mock_api(200, BUNDLE)
        client = make_client(api)

        result = await client.get_edgeworker_version_content(
            GetEdgeWorkerVersionContentRequest(edgeworker_id=42, version="2")
        )

        assert api.path == "/edgeworkers/v1/ids/42/versions/2/content"
        assert api.request.headers["Accept"] == "application/gzip"
        assert result == BUNDLE

    @pytest.mark.asyncio
    async def test_create_version(self, make_client, mock_api):
        """Test bundle upload"""
        api = mock_api(201, VERSION)
        client = make_client(api)

        result = await client.create_edgeworker_version(
            CreateEdgeWorkerVersionRequest(edgeworker_id=42, content_bundle=BUNDLE)
        )

        assert api.method == "POST"
        assert api.path == "/edgeworkers/v1/ids/42/versions"
        assert api.request.headers["Content-Type"] == "application/gzip"
        assert api.request.content == BUNDLE
        assert result.version == "2"

    @pytest.mark.asyncio
    async def test_create_version_requires_bundle(self, make_client, mock_api):
        """Test empty bundle is rejected"""
        api = mock_api(201, VERSION)
        client = make_client(api)

        with pytest.raises(StructValidationError) as exc_info:
            await client.create_edgeworker_version(CreateEdgeWorkerVersionRequest(edgeworker_id=42))

        assert exc_info.value.errors == {"content_bundle": "Data should have at least 1 byte"}
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_delete_version(self, make_client, mock_api):
        """Test delete expects 204"""
        api = mock_api(204)
        client = make_client(api)

        await client.delete_edgeworker_version(DeleteEdgeWorkerVersionRequest(edgeworker_id=42, version="2"))

        assert api.method == "DELETE"
        assert api.path == "/edgeworkers/v1/ids/42/versions/2"
