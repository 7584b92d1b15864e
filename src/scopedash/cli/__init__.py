"""
CLI commands for scopedash.
"""

from scopedash.cli.create import (
    create_dashboard_command,
    resolve_scope_command,
    usage_command,
)

__all__ = [
    "create_dashboard_command",
    "resolve_scope_command",
    "usage_command",
]
