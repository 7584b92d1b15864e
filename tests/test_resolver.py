"""Tests for scope name resolution."""

import json

import pytest
import respx
from httpx import Response
from structlog.testing import capture_logs

from scopedash.models import ScopeKind, ScopeReference
from scopedash.resolver import NameResolver, build_search_request

SEARCH_URL = "https://mgmt.example.com/vmturbo/rest/search"


def test_build_search_request_for_group():
    body = build_search_request(ScopeKind.GROUP, "Preprod AWS Accounts Group").to_dict()

    criterion = body["criteriaList"][0]
    assert criterion["filterType"] == "groupsByName"
    assert criterion["expVal"] == r"^Preprod\ AWS\ Accounts\ Group$"
    assert criterion["caseSensitive"] is True
    assert body["className"] == "Group"
    assert body["scope"] is None


@pytest.mark.asyncio
async def test_resolve_returns_first_match(client):
    with respx.mock:
        route = respx.post(SEARCH_URL).mock(
            return_value=Response(200, json=[{"uuid": "123-456", "displayName": "AWS Dev"}])
        )

        scope = await NameResolver(client).resolve("Account", "AWS Dev")

    assert scope == ScopeReference(uuid="123-456", display_name="AWS Dev")
    assert route.call_count == 1
    sent = json.loads(route.calls.last.request.content)
    assert sent["criteriaList"][0]["filterType"] == "businessAccountByName"
    assert sent["criteriaList"][0]["expVal"] == r"^AWS\ Dev$"
    assert sent["className"] == "BusinessAccount"


@pytest.mark.asyncio
async def test_resolve_empty_result_is_not_found(client):
    with respx.mock:
        respx.post(SEARCH_URL).mock(return_value=Response(200, json=[]))

        with capture_logs() as logs:
            scope = await NameResolver(client).resolve(ScopeKind.BILLING_FAMILY, "EA Azure")

    assert scope is None
    assert any(entry["event"] == "scope_not_found" for entry in logs)


@pytest.mark.asyncio
async def test_resolve_unrecognized_kind_makes_no_request(client):
    with respx.mock(assert_all_called=False) as respx_mock:
        route = respx_mock.post(SEARCH_URL).mock(return_value=Response(200, json=[]))

        with capture_logs() as logs:
            scope = await NameResolver(client).resolve("VirtualMachine", "vm-1")

    assert scope is None
    assert route.call_count == 0
    assert logs[0]["event"] == "unrecognized_scope_kind"
    assert logs[0]["log_level"] == "error"


@pytest.mark.asyncio
async def test_resolve_multiple_matches_takes_first(client):
    with respx.mock:
        respx.post(SEARCH_URL).mock(
            return_value=Response(
                200,
                json=[
                    {"uuid": "g-1", "displayName": "Prod"},
                    {"uuid": "g-2", "displayName": "Prod"},
                ],
            )
        )

        with capture_logs() as logs:
            scope = await NameResolver(client).resolve("Group", "Prod")

    assert scope is not None and scope.uuid == "g-1"
    assert any(entry["event"] == "scope_name_ambiguous" for entry in logs)
