"""Scoped dashboard data models.

Typed Python models for the search criteria and widgetset JSON structures
exchanged with the management server.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ScopeKind(str, Enum):
    """Entity category a dashboard can be scoped to."""

    GROUP = "Group"
    ACCOUNT = "Account"
    BILLING_FAMILY = "BillingFamily"
    BUSINESS_APPLICATION = "BusinessApplication"

    @property
    def filter_type(self) -> str:
        return _SEARCH_FILTERS[self][0]

    @property
    def class_name(self) -> str:
        return _SEARCH_FILTERS[self][1]

    @classmethod
    def parse(cls, value: "str | ScopeKind | None") -> "ScopeKind | None":
        """Map user input to a kind, or ``None`` when it is not recognized."""
        if isinstance(value, ScopeKind):
            return value
        if not value:
            return None
        if value in _ALIASES:
            return _ALIASES[value]
        try:
            return cls(value)
        except ValueError:
            return None


# kind -> (search filterType, entity className)
_SEARCH_FILTERS: dict[ScopeKind, tuple[str, str]] = {
    ScopeKind.GROUP: ("groupsByName", "Group"),
    ScopeKind.ACCOUNT: ("businessAccountByName", "BusinessAccount"),
    ScopeKind.BILLING_FAMILY: ("billingFamilyByName", "BillingFamily"),
    ScopeKind.BUSINESS_APPLICATION: ("busAppsByName", "BusinessApplication"),
}

_ALIASES: dict[str, ScopeKind] = {"BusApp": ScopeKind.BUSINESS_APPLICATION}


@dataclass(frozen=True)
class SearchCriterion:
    """Single criterion of a search request."""

    exp_val: str
    filter_type: str
    exp_type: str = "RXEQ"
    case_sensitive: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "expType": self.exp_type,
            "expVal": self.exp_val,
            "filterType": self.filter_type,
            "caseSensitive": self.case_sensitive,
        }


@dataclass(frozen=True)
class SearchRequest:
    """Search request body; ``scope`` is always unrestricted."""

    criteria: list[SearchCriterion]
    class_name: str
    logical_operator: str = "AND"

    def to_dict(self) -> dict[str, Any]:
        return {
            "criteriaList": [c.to_dict() for c in self.criteria],
            "logicalOperator": self.logical_operator,
            "className": self.class_name,
            "scope": None,
        }


@dataclass(frozen=True)
class ScopeReference:
    """Resolved scope: identifier and display name of a single entity."""

    uuid: str
    display_name: str

    def to_widget_scope(self) -> dict[str, Any]:
        """Scope block embedded in every widget."""
        return {
            "uuid": self.uuid,
            "displayName": self.display_name,
            "className": "RefGroup",
        }


@dataclass(frozen=True)
class WidgetElement:
    """Element rendered inside a widget."""

    row: int
    column: int
    type: str
    properties: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "column": self.column,
            "type": self.type,
            "properties": dict(self.properties),
        }


@dataclass(frozen=True)
class WidgetDescriptor:
    """Widget placed at a fixed grid position on the dashboard."""

    display_name: str
    type: str
    scope: ScopeReference
    row: int
    column: int
    size_rows: int
    size_columns: int
    elements: list[WidgetElement] = field(default_factory=list)
    # Only some widget types carry an explicit (empty) period.
    include_period: bool = False

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "displayName": self.display_name,
            "type": self.type,
            "scope": self.scope.to_widget_scope(),
            "row": self.row,
            "column": self.column,
            "sizeRows": self.size_rows,
            "sizeColumns": self.size_columns,
        }
        if self.include_period:
            result["startPeriod"] = None
            result["endPeriod"] = None
        result["widgetElements"] = [e.to_dict() for e in self.elements]
        return result


@dataclass(frozen=True)
class DashboardDescriptor:
    """Widgetset creation body."""

    display_name: str
    widgets: list[WidgetDescriptor]
    scope: str = "Market"
    category: str = "CUSTOM"
    shared_with_all_users: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to the widgetset JSON format."""
        return {
            "displayName": self.display_name,
            "scope": self.scope,
            "widgets": [w.to_dict() for w in self.widgets],
            "category": self.category,
            "isSharedWithAllUsers": self.shared_with_all_users,
        }


@dataclass(frozen=True)
class CreationSuccess:
    """Server accepted the widgetset and returned the created dashboard."""

    dashboard: dict[str, Any]

    @property
    def ok(self) -> bool:
        return True

    @property
    def uuid(self) -> str | None:
        return self.dashboard.get("uuid")


@dataclass(frozen=True)
class CreationFailure:
    """Server answered with an error envelope."""

    code: Any
    message: str

    @property
    def ok(self) -> bool:
        return False


CreationResult = Union[CreationSuccess, CreationFailure]


__all__ = [
    "CreationFailure",
    "CreationResult",
    "CreationSuccess",
    "DashboardDescriptor",
    "ScopeKind",
    "ScopeReference",
    "SearchCriterion",
    "SearchRequest",
    "WidgetDescriptor",
    "WidgetElement",
]
