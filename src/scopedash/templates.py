"""Cloud cost dashboard template.

The dashboard holds the cost-saved-by-actions chart, the pending actions
summary, the investments and savings ring charts, and the resource cost
comparison table. Layout coordinates are fixed template data.
"""

from __future__ import annotations

from typing import Any

from scopedash.models import (
    DashboardDescriptor,
    ScopeReference,
    WidgetDescriptor,
    WidgetElement,
)


def _element_properties(display_param: str, chart_type: str, directive: str) -> dict[str, Any]:
    # The server stores these flags as strings for every widget but one.
    return {
        "displayParamName": display_param,
        "overrideScope": "true",
        "show": "true",
        "chartType": chart_type,
        "widgetScopeEnvironmentType": "CLOUD",
        "directive": directive,
    }


def _cost_saved_widget(scope: ScopeReference) -> WidgetDescriptor:
    return WidgetDescriptor(
        display_name="COST_SAVED_BY_ACTIONS_WIDGET_TITLE",
        type="costSavedByActions",
        scope=scope,
        row=11,
        column=6,
        size_rows=9,
        size_columns=6,
        include_period=True,
        elements=[
            WidgetElement(
                row=0,
                column=0,
                type="CHART",
                properties={
                    "displayParamName": "COST_SAVED_BY_ACTIONS_WIDGET_TITLE",
                    "overrideScope": True,
                    "show": True,
                    "chartType": "Text and Area Chart",
                    "widgetScopeEnvironmentType": "CLOUD",
                    "directive": "cost-saved-by-actions-chart",
                },
            )
        ],
    )


def _pending_actions_widget(scope: ScopeReference) -> WidgetDescriptor:
    return WidgetDescriptor(
        display_name="PENDING_ACTIONS",
        type="pendingActions",
        scope=scope,
        row=0,
        column=10,
        size_rows=11,
        size_columns=2,
        elements=[
            WidgetElement(
                row=0,
                column=1,
                type="SUMMARY",
                properties=_element_properties("PENDING_ACTIONS", "TEXT", "pending-actions-summary"),
            )
        ],
    )


def _saving_or_investment_widget(scope: ScopeReference, enum_name: str, column: int) -> WidgetDescriptor:
    return WidgetDescriptor(
        display_name="WIDGET.POTENTIAL_SAVING_OR_INVESTMENT.NAME",
        type="potentialSavingOrInvestment",
        scope=scope,
        row=11,
        column=column,
        size_rows=9,
        size_columns=3,
        elements=[
            WidgetElement(
                row=0,
                column=0,
                type="CHART",
                properties=_element_properties(
                    f"POTENTIAL_SAVING_OR_INVESTMENT_ENUMS.{enum_name}",
                    "Ring Chart",
                    "potential-saving-or-investment-chart",
                ),
            )
        ],
    )


def _resource_comparison_widget(scope: ScopeReference) -> WidgetDescriptor:
    return WidgetDescriptor(
        display_name="RESOURCE_COMPARISON_SUMMARY_BY_COST",
        type="resourceComparison",
        scope=scope,
        row=0,
        column=0,
        size_rows=11,
        size_columns=10,
        elements=[
            WidgetElement(
                row=0,
                column=1,
                type="CHART",
                properties=_element_properties(
                    "RESOURCE_COMPARISON_SUMMARY_BY_COST",
                    "Tabular",
                    "resource-comparison-chart",
                ),
            )
        ],
    )


def build_dashboard(scope: ScopeReference, dashboard_name: str) -> DashboardDescriptor:
    """Build the five-widget cloud dashboard for ``scope``.

    Args:
        scope: Resolved group, account, billing family or business application
        dashboard_name: Title of the dashboard to create

    Returns:
        Dashboard descriptor; call ``to_dict()`` for the request body
    """
    return DashboardDescriptor(
        display_name=dashboard_name,
        widgets=[
            _cost_saved_widget(scope),
            _pending_actions_widget(scope),
            _saving_or_investment_widget(scope, "INVESTMENTS", column=3),
            _saving_or_investment_widget(scope, "SAVINGS", column=0),
            _resource_comparison_widget(scope),
        ],
    )


__all__ = ["build_dashboard"]
