"""Create cloud cost dashboards scoped to a named group, account or billing family."""

__version__ = "0.1.0"
