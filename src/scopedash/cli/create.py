"""CLI commands for resolving scopes and creating scoped dashboards."""

from __future__ import annotations

import asyncio
import json
from typing import Optional

from scopedash.cli import ux
from scopedash.client import ManagementClient, ScopeDashAPIError
from scopedash.config import get_settings
from scopedash.creator import USAGE, USAGE_LINES, DashboardCreator, missing_argument
from scopedash.models import CreationFailure, ScopeKind
from scopedash.resolver import NameResolver


def _client(
    base_url: Optional[str],
    timeout: Optional[float],
    session_cookie: Optional[str],
    insecure: bool,
) -> ManagementClient:
    return ManagementClient.from_settings(
        get_settings(),
        base_url=base_url,
        timeout=timeout,
        session_cookie=session_cookie,
        verify=False if insecure else None,
    )


def usage_command() -> int:
    """Print usage lines."""
    ux.console.print()
    for line in USAGE_LINES:
        ux.console.print(f"**** {line}", markup=False)
    ux.console.print()
    return 0


def create_dashboard_command(
    scope_kind: str,
    scope_name: str,
    dashboard_name: str,
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    session_cookie: Optional[str] = None,
    insecure: bool = False,
    dry_run: bool = False,
) -> int:
    """Create a dashboard scoped to a named entity.

    Args:
        scope_kind: Group, Account, BillingFamily or BusinessApplication
        scope_name: Exact name of the entity the dashboard is scoped to
        dashboard_name: Name given to the new dashboard
        base_url: Management server URL (default: from settings)
        timeout: HTTP timeout in seconds (default: from settings)
        session_cookie: JSESSIONID of an existing session (default: from settings)
        insecure: Skip TLS certificate verification
        dry_run: Resolve the scope and print the dashboard body without creating it

    Returns:
        Exit code (0 for success, 1 for error)
    """
    missing = missing_argument(scope_kind, scope_name, dashboard_name)
    if missing is not None:
        ux.error(f"Missing {missing.replace('_', ' ')}")
        ux.console.print(USAGE, markup=False)
        return 1

    kind = ScopeKind.parse(scope_kind)
    if kind is None:
        ux.error(f"Unrecognized scope type: {scope_kind}")
        ux.console.print(USAGE, markup=False)
        return 1

    # With --dry-run only the JSON body goes to stdout.
    ux.info(
        f"Building dashboard, {dashboard_name}, scoped to {kind.value}, {scope_name} ...",
        err=dry_run,
    )

    creator = DashboardCreator(_client(base_url, timeout, session_cookie, insecure))

    try:
        if dry_run:
            dashboard = asyncio.run(creator.prepare(kind, scope_name, dashboard_name))
            if dashboard is None:
                ux.error(f"No {kind.value} named {scope_name} was found", err=True)
                return 1
            print(json.dumps(dashboard.to_dict(), indent=2))
            ux.success("Dashboard body built (dry run)", err=True)
            return 0

        result = asyncio.run(creator.create_scoped_dashboard(kind, scope_name, dashboard_name))
    except ScopeDashAPIError as exc:
        ux.error(f"Request failed: {exc}", err=dry_run)
        return 1

    if result is None:
        ux.error(f"No {kind.value} named {scope_name} was found")
        return 1
    if isinstance(result, CreationFailure):
        ux.error(f"ERROR: {result.message}")
        return 1

    ux.success(f"Dashboard, {dashboard_name}, was created.")
    if result.uuid:
        ux.print_key_value({"uuid": result.uuid})
    return 0


def resolve_scope_command(
    scope_kind: str,
    scope_name: str,
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    session_cookie: Optional[str] = None,
    insecure: bool = False,
) -> int:
    """Print the uuid of the entity named ``scope_name``."""
    kind = ScopeKind.parse(scope_kind)
    if kind is None:
        ux.error(f"Unrecognized scope type: {scope_kind}")
        return 1

    resolver = NameResolver(_client(base_url, timeout, session_cookie, insecure))
    try:
        scope = asyncio.run(resolver.resolve(kind, scope_name))
    except ScopeDashAPIError as exc:
        ux.error(f"Request failed: {exc}")
        return 1

    if scope is None:
        ux.error(f"No {kind.value} named {scope_name} was found")
        return 1

    ux.print_key_value({"uuid": scope.uuid, "displayName": scope.display_name}, title=kind.value)
    return 0
