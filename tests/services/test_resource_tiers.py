"""Tests for Resource Tiers"""

import pytest

from edgeworkers import (
    EdgeWorkerLimit,
    GetResourceTierRequest,
    ListResourceTiersRequest,
    ResourceTier,
    StructValidationError,
)

TIER = """
{
    "resourceTierId": 100,
    "resourceTierName": "Basic Compute",
    "edgeWorkerLimits": [
        {"limitName": "Maximum CPU time during initialization", "limitValue": 30, "limitUnit": "MILLISECOND"},
        {"limitName": "Maximum memory usage per event handler", "limitValue": 1048576, "limitUnit": "BYTE"}
    ]
}"""


class TestResourceTiers:
    """Tests for resource tier operations"""

    @pytest.mark.asyncio
    async def test_list_resource_tiers(self, make_client, mock_api):
        """Test contract ID is sent as a query parameter"""
        api = mock_api(200, f'{{"resourceTiers": [{TIER}]}}')
        client = make_client(api)

        result = await client.list_resource_tiers(ListResourceTiersRequest(contract_id="1-599K"))

        assert api.path == "/edgeworkers/v1/resource-tiers?contractId=1-599K"
        assert result.resource_tiers == [
            ResourceTier(
                id=100,
                name="Basic Compute",
                edgeworker_limits=[
                    EdgeWorkerLimit(
                        limit_name="Maximum CPU time during initialization", limit_value=30, limit_unit="MILLISECOND"
                    ),
                    EdgeWorkerLimit(
                        limit_name="Maximum memory usage per event handler", limit_value=1048576, limit_unit="BYTE"
                    ),
                ],
            )
        ]

    @pytest.mark.asyncio
    async def test_list_resource_tiers_missing_contract(self, make_client, mock_api):
        """Test contract ID is required"""
        client = make_client(mock_api(200, '{"resourceTiers": []}'))

        with pytest.raises(StructValidationError) as exc_info:
            await client.list_resource_tiers(ListResourceTiersRequest())

        assert exc_info.value.errors == {"contract_id": "String should have at least 1 character"}

    @pytest.mark.asyncio
    async def test_get_resource_tier(self, make_client, mock_api):
        """Test the tier of one EdgeWorker"""
        api = mock_api(200, TIER)
        client = make_client(api)

        result = await client.get_resource_tier(GetResourceTierRequest(edgeworker_id=42))

        assert api.path == "/edgeworkers/v1/ids/42/resource-tier"
        assert result.name == "Basic Compute"
