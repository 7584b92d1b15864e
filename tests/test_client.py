import httpx
import pytest
import respx
from httpx import Response

from scopedash.client import ManagementClient, ScopeDashAPIError
from scopedash.config import Settings

SEARCH_URL = "https://mgmt.example.com/vmturbo/rest/search"
WIDGETSETS_URL = "https://mgmt.example.com/vmturbo/rest/widgetsets"


@pytest.mark.asyncio
async def test_search_sends_session_cookie_and_json(client):
    with respx.mock:
        route = respx.post(SEARCH_URL).mock(return_value=Response(200, json=[]))

        result = await client.search({"criteriaList": []})

    assert result == []
    request = route.calls.last.request
    assert "JSESSIONID=session-123" in request.headers["Cookie"]
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_search_error_envelope_raises():
    client = ManagementClient("https://mgmt.example.com")

    with respx.mock:
        respx.post(SEARCH_URL).mock(
            return_value=Response(401, json={"type": 401, "exception": "Unauthorized"})
        )

        with pytest.raises(ScopeDashAPIError, match="Unauthorized"):
            await client.search({"criteriaList": []})


@pytest.mark.asyncio
async def test_create_widgetset_returns_error_body(client):
    with respx.mock:
        respx.post(WIDGETSETS_URL).mock(
            return_value=Response(400, json={"type": 400, "exception": "Invalid widgetset"})
        )

        data = await client.create_widgetset({"displayName": "D"})

    assert data == {"type": 400, "exception": "Invalid widgetset"}


@pytest.mark.asyncio
async def test_network_error_wrapped(client):
    with respx.mock:
        route = respx.post(WIDGETSETS_URL)
        route.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(ScopeDashAPIError, match="connection refused"):
            await client.create_widgetset({})

        assert route.call_count == 1


@pytest.mark.asyncio
async def test_non_json_error_raises(client):
    with respx.mock:
        respx.post(WIDGETSETS_URL).mock(return_value=Response(502, text="<html>Bad Gateway</html>"))

        with pytest.raises(ScopeDashAPIError, match="502"):
            await client.create_widgetset({})


@pytest.mark.asyncio
async def test_empty_error_response_raises(client):
    with respx.mock:
        respx.post(WIDGETSETS_URL).mock(return_value=Response(503))

        with pytest.raises(ScopeDashAPIError, match="503"):
            await client.create_widgetset({})


@pytest.mark.asyncio
async def test_custom_api_prefix():
    client = ManagementClient("https://mgmt.example.com/", api_prefix="api/v3/")

    with respx.mock:
        route = respx.post("https://mgmt.example.com/api/v3/search").mock(
            return_value=Response(200, json=[])
        )

        await client.search({})

    assert route.call_count == 1


def test_from_settings_applies_overrides():
    settings = Settings(base_url="https://a.example.com", session_cookie="abc", http_timeout=5)

    client = ManagementClient.from_settings(settings, base_url="https://b.example.com", timeout=None)

    assert client._base_url == "https://b.example.com"
    assert client._session_cookie == "abc"
    assert client._timeout == 5
