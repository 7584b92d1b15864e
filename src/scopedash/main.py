"""
scopedash command line.

Usage:
    scopedash <command> [args]

Creates cloud cost dashboards scoped to a named group, account or billing
family on the management server.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from scopedash.config import get_settings
from scopedash.logging import configure_logging

SCOPE_KIND_CHOICES = ["Group", "Account", "BillingFamily", "BusinessApplication", "BusApp"]
LOG_LEVEL_CHOICES = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base-url", help="Management server URL (env: SCOPEDASH_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument(
        "--session-cookie",
        help="JSESSIONID of an existing session (env: SCOPEDASH_SESSION_COOKIE)",
    )
    parser.add_argument("--insecure", action="store_true", help="Skip TLS certificate verification")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scopedash", description="Scoped cloud dashboard creator")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        help="Log level (default: from settings)",
    )
    parser.add_argument("--log-format", choices=["console", "json"], help="Log output format")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("usage", help="Show usage examples")

    create_parser = subparsers.add_parser("create", help="Create a dashboard scoped to a named entity")
    create_parser.add_argument("scope_kind", choices=SCOPE_KIND_CHOICES, help="Type of scope")
    create_parser.add_argument("scope_name", help="Exact, unique name of the group, account or billing family")
    create_parser.add_argument("dashboard_name", help="Name of the dashboard to create")
    create_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve the scope and print the dashboard body without creating it",
    )
    _add_connection_arguments(create_parser)

    resolve_parser = subparsers.add_parser("resolve", help="Look up the uuid of a named entity")
    resolve_parser.add_argument("scope_kind", choices=SCOPE_KIND_CHOICES, help="Type of scope")
    resolve_parser.add_argument("scope_name", help="Exact name of the entity")
    _add_connection_arguments(resolve_parser)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(
        args.log_level or settings.log_level,
        log_format=args.log_format or settings.log_format,
    )

    if args.command == "create":
        from scopedash.cli.create import create_dashboard_command

        sys.exit(create_dashboard_command(
            args.scope_kind,
            args.scope_name,
            args.dashboard_name,
            base_url=args.base_url,
            timeout=args.timeout,
            session_cookie=args.session_cookie,
            insecure=args.insecure,
            dry_run=args.dry_run,
        ))

    if args.command == "resolve":
        from scopedash.cli.create import resolve_scope_command

        sys.exit(resolve_scope_command(
            args.scope_kind,
            args.scope_name,
            base_url=args.base_url,
            timeout=args.timeout,
            session_cookie=args.session_cookie,
            insecure=args.insecure,
        ))

    from scopedash.cli.create import usage_command

    sys.exit(usage_command())


if __name__ == "__main__":  # pragma: no cover
    main()
