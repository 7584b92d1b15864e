"""Create a cloud cost dashboard scoped to a named entity.

The flow is strictly sequential: resolve the scope name to a uuid with one
search request, build the widgetset body from the template, then submit
one creation request and interpret the answer.
"""

from __future__ import annotations

from typing import Any

import structlog

from scopedash.client import ManagementClient
from scopedash.logging import bind_context
from scopedash.models import (
    CreationFailure,
    CreationResult,
    CreationSuccess,
    DashboardDescriptor,
    ScopeKind,
)
from scopedash.resolver import NameResolver
from scopedash.templates import build_dashboard

logger = structlog.get_logger()

USAGE_LINES = (
    'USAGE: scopedash create "Group" "GROUP NAME" "DASHBOARD NAME"',
    'USAGE: scopedash create "Account" "ACCOUNT NAME" "DASHBOARD NAME"',
    'USAGE: scopedash create "BillingFamily" "BILLING FAMILY NAME" "DASHBOARD NAME"',
)

USAGE = (
    'USAGE: scopedash create "Group"|"Account"|"BillingFamily" '
    '"GROUP OR ACCOUNT OR BILLING FAMILY NAME" "DASHBOARD NAME"'
)

_MISSING_ARGUMENT_MESSAGES = {
    "scope_kind": 'Need to pass scope type - i.e. "Group" or "Account" or "BillingFamily"',
    "scope_name": "Need to pass name for group to be used for the scope of the dashboard.",
    "dashboard_name": "Need to pass name for dashboard to be created.",
}


def missing_argument(scope_kind: Any, scope_name: str | None, dashboard_name: str | None) -> str | None:
    """Name of the first empty or absent argument, if any."""
    for argument, value in (
        ("scope_kind", scope_kind),
        ("scope_name", scope_name),
        ("dashboard_name", dashboard_name),
    ):
        if value is None or value == "":
            return argument
    return None


def interpret_creation_response(data: Any) -> CreationResult:
    """Classify the widgetset creation response.

    The server signals failure by answering with an envelope whose top-level
    ``type`` holds the HTTP status code and ``exception`` holds the message.
    A dashboard payload that happened to carry a top-level ``type`` would be
    misread as a failure.
    """
    if isinstance(data, dict) and "type" in data:
        return CreationFailure(code=data["type"], message=str(data.get("exception", "")))
    return CreationSuccess(dashboard=data if isinstance(data, dict) else {})


class DashboardCreator:
    """Resolves a scope and creates the templated dashboard for it."""

    def __init__(self, client: ManagementClient, resolver: NameResolver | None = None) -> None:
        self._client = client
        self._resolver = resolver or NameResolver(client)

    async def prepare(
        self,
        scope_kind: ScopeKind | str | None,
        scope_name: str | None,
        dashboard_name: str | None,
    ) -> DashboardDescriptor | None:
        """Validate input, resolve the scope and build the dashboard body.

        Returns ``None`` (after logging why) when an argument is missing, the
        scope kind is not recognized, or no entity has that name.
        """
        missing = missing_argument(scope_kind, scope_name, dashboard_name)
        if missing is not None:
            logger.error(
                "missing_argument",
                argument=missing,
                message=_MISSING_ARGUMENT_MESSAGES[missing],
                usage=USAGE,
            )
            return None

        kind_label = scope_kind.value if isinstance(scope_kind, ScopeKind) else scope_kind
        log = bind_context(scope_kind=kind_label, scope_name=scope_name, dashboard=dashboard_name)
        log.info("building_dashboard")

        scope = await self._resolver.resolve(scope_kind, scope_name)
        if scope is None:
            log.error("scope_unresolved", usage=USAGE)
            return None

        return build_dashboard(scope, dashboard_name)

    async def create_scoped_dashboard(
        self,
        scope_kind: ScopeKind | str | None,
        scope_name: str | None,
        dashboard_name: str | None,
    ) -> CreationResult | None:
        """Create ``dashboard_name`` scoped to the entity named ``scope_name``.

        Returns ``None`` when nothing was submitted, otherwise the outcome of
        the creation request.
        """
        dashboard = await self.prepare(scope_kind, scope_name, dashboard_name)
        if dashboard is None:
            return None

        response = await self._client.create_widgetset(dashboard.to_dict())
        result = interpret_creation_response(response)

        if isinstance(result, CreationFailure):
            logger.error(
                "dashboard_creation_failed",
                dashboard=dashboard_name,
                code=result.code,
                error=result.message,
            )
        else:
            logger.info("dashboard_created", dashboard=dashboard_name, uuid=result.uuid)
        return result


__all__ = [
    "DashboardCreator",
    "USAGE",
    "USAGE_LINES",
    "interpret_creation_response",
    "missing_argument",
]
