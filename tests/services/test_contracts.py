"""Tests for Contracts"""

import pytest

from edgeworkers import APIError


class TestListContracts:
    """Tests for list_contracts"""

    @pytest.mark.asyncio
    async def test_list_contracts(self, make_client, mock_api):
        """Test contract IDs are decoded"""
        api = mock_api(200, '{"contractIds": ["1-599K", "B-M-28QYF3M"]}')
        client = make_client(api)

        result = await client.list_contracts()

        assert api.method == "GET"
        assert api.path == "/edgeworkers/v1/contracts"
        assert result.contract_ids == ["1-599K", "B-M-28QYF3M"]

    @pytest.mark.asyncio
    async def test_list_contracts_forbidden(self, make_client, mock_api):
        """Test 403 is raised with its payload"""
        api = mock_api(
            403,
            """
{
    "type": "https://problems.luna-dev.akamaiapis.net/-/pep-authz/deny",
    "title": "Forbidden",
    "status": 403,
    "detail": "The client does not have the grant needed for the request",
    "instance": "https://akaa.luna-dev.akamaiapis.net/edgeworkers/v1/contracts",
    "authzRealm": "scuomder224df6ct.dkekfr3qqg4dghpj",
    "method": "GET",
    "serverIp": "104.81.220.111",
    "clientIp": "89.64.55.111",
    "requestId": "a73affa111",
    "requestTime": "2021-12-06T10:27:11Z"
}""",
        )
        client = make_client(api)

        with pytest.raises(APIError) as exc_info:
            await client.list_contracts()

        error = exc_info.value
        assert error.status == 403
        assert error.problem.authz_realm == "scuomder224df6ct.dkekfr3qqg4dghpj"
        assert error.problem.server_ip == "104.81.220.111"
        assert error.problem.request_time == "2021-12-06T10:27:11Z"
        assert str(error).startswith("listing contracts: API error")
