"""Tests for Bundle Validation"""

import gzip

import pytest

from edgeworkers import StructValidationError, ValidateBundleRequest, ValidationIssue


class TestValidateBundle:
    """Tests for validate_bundle"""

    @pytest.mark.asyncio
    async def test_validate_bundle(self, make_client, mock_api):
        """Test errors and warnings are decoded"""
        bundle = gzip.compress(b"bundle")
        api = mock_api(
            200,
            """
{
    "errors": [{"type": "STRICT_MODE_VIOLATION", "message": "main.js::8:4 SyntaxError: Unexpected identifier"}],
    "warnings": [{"type": "ACCESS_TOKEN_EXPIRING_SOON", "message": "token expires in 5 days"}]
}""",
        )
        client = make_client(api)

        result = await client.validate_bundle(ValidateBundleRequest(bundle=bundle))

        assert api.method == "POST"
        assert api.path == "/edgeworkers/v1/validations"
        assert api.request.headers["Content-Type"] == "application/gzip"
        assert api.request.content == bundle
        assert result.errors == [
            ValidationIssue(type="STRICT_MODE_VIOLATION", message="main.js::8:4 SyntaxError: Unexpected identifier")
        ]
        assert result.warnings[0].type == "ACCESS_TOKEN_EXPIRING_SOON"

    @pytest.mark.asyncio
    async def test_validate_bundle_empty(self, make_client, mock_api):
        """Test empty bundle is rejected"""
        api = mock_api(200, '{"errors": [], "warnings": []}')
        client = make_client(api)

        with pytest.raises(StructValidationError):
            await client.validate_bundle(ValidateBundleRequest())

        assert api.requests == []
