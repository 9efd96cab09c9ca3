"""Tests for Secure Tokens"""

import pytest

from edgeworkers import APIError, CreateSecureTokenRequest, StructValidationError

TRACE = "st=1641295764~exp=1641296664~acl=/*~hmac=f6d18857a6c738664b65a59036ac6f8348abe6b34a9503ec1262f18f114ed43f"


class TestCreateSecureToken:
    """Tests for create_secure_token"""

    @pytest.mark.asyncio
    async def test_create_secure_token(self, make_client, mock_api):
        """Test body with ACL and expiry"""
        api = mock_api(201, f'{{"akamaiEwTrace": "{TRACE}"}}')
        client = make_client(api)

        result = await client.create_secure_token(
            CreateSecureTokenRequest(acl="/*", expiry=15, hostname="test.devexp.akamai.com")
        )

        assert api.method == "POST"
        assert api.path == "/edgeworkers/v1/secure-token"
        assert api.json() == {"acl": "/*", "expiry": 15, "hostname": "test.devexp.akamai.com"}
        assert result.akamai_ew_trace == TRACE

    @pytest.mark.asyncio
    async def test_create_secure_token_hostname_only(self, make_client, mock_api):
        """Test empty fields are omitted"""
        api = mock_api(201, f'{{"akamaiEwTrace": "{TRACE}"}}')
        client = make_client(api)

        await client.create_secure_token(CreateSecureTokenRequest(hostname="test.devexp.akamai.com"))

        assert api.json() == {"hostname": "test.devexp.akamai.com"}

    @pytest.mark.asyncio
    async def test_create_secure_token_with_property(self, make_client, mock_api):
        """Test property ID and network are sent"""
        api = mock_api(201, f'{{"akamaiEwTrace": "{TRACE}"}}')
        client = make_client(api)

        await client.create_secure_token(
            CreateSecureTokenRequest(hostname="test.devexp.akamai.com", property_id="200153206", network="STAGING")
        )

        assert api.json() == {"hostname": "test.devexp.akamai.com", "network": "STAGING", "propertyId": "200153206"}

    @pytest.mark.asyncio
    async def test_create_secure_token_empty(self, make_client, mock_api):
        """Test hostname is required"""
        api = mock_api(201, "{}")
        client = make_client(api)

        with pytest.raises(StructValidationError) as exc_info:
            await client.create_secure_token(CreateSecureTokenRequest())

        assert exc_info.value.errors == {"hostname": "String should have at least 1 character"}
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_create_secure_token_acl_and_url(self, make_client, mock_api):
        """Test ACL and URL are mutually exclusive"""
        client = make_client(mock_api(201, "{}"))

        with pytest.raises(StructValidationError) as exc_info:
            await client.create_secure_token(
                CreateSecureTokenRequest(acl="/*", url="/", expiry=15, hostname="test.devexp.akamai.com")
            )

        assert exc_info.value.errors == {"url": "only one of acl or url can be provided"}

    @pytest.mark.asyncio
    async def test_create_secure_token_invalid_expiry(self, make_client, mock_api):
        """Test expiry above 720 minutes"""
        client = make_client(mock_api(201, "{}"))

        with pytest.raises(StructValidationError) as exc_info:
            await client.create_secure_token(
                CreateSecureTokenRequest(acl="/*", expiry=1440, hostname="test.devexp.akamai.com")
            )

        assert exc_info.value.errors == {"expiry": "Input should be less than or equal to 720"}

    @pytest.mark.asyncio
    async def test_create_secure_token_unauthorized(self, make_client, mock_api):
        """Test 401 problem details"""
        api = mock_api(
            401,
            """
{
    "type": "https://problems.luna-dev.akamaiapis.net/-/pep-authn/deny",
    "title": "Not authorized",
    "status": 401,
    "detail": "Inactive client token",
    "method": "POST",
    "requestId": "17f6b2bc"
}""",
        )
        client = make_client(api)

        with pytest.raises(APIError) as exc_info:
            await client.create_secure_token(
                CreateSecureTokenRequest(acl="/*", expiry=15, hostname="test.devexp.akamai.com", network="STAGING")
            )

        assert exc_info.value.detail == "Inactive client token"
        assert exc_info.value.problem.request_id == "17f6b2bc"
