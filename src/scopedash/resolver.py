"""Resolve a scope name to the uuid of the entity it names."""

from __future__ import annotations

import structlog

from scopedash.client import ManagementClient
from scopedash.escape import exact_match_pattern
from scopedash.models import ScopeKind, ScopeReference, SearchCriterion, SearchRequest

logger = structlog.get_logger()


def build_search_request(kind: ScopeKind, name: str) -> SearchRequest:
    """Case-sensitive, anchored search for an entity named exactly ``name``."""
    return SearchRequest(
        criteria=[
            SearchCriterion(
                exp_val=exact_match_pattern(name),
                filter_type=kind.filter_type,
            )
        ],
        class_name=kind.class_name,
    )


class NameResolver:
    """Looks up groups, accounts, billing families and business applications by name."""

    def __init__(self, client: ManagementClient) -> None:
        self._client = client

    async def resolve(self, scope_kind: ScopeKind | str, name: str) -> ScopeReference | None:
        """Return the entity named ``name``, or ``None`` when there is none.

        An unrecognized ``scope_kind`` is logged and returns ``None`` without
        contacting the server.
        """
        kind = ScopeKind.parse(scope_kind)
        if kind is None:
            logger.error("unrecognized_scope_kind", scope_kind=str(scope_kind))
            return None

        request = build_search_request(kind, name)
        matches = await self._client.search(request.to_dict())
        if not matches:
            logger.warning("scope_not_found", scope_kind=kind.value, name=name)
            return None
        if len(matches) > 1:
            # The anchored pattern should make this impossible; take the first anyway.
            logger.warning(
                "scope_name_ambiguous",
                scope_kind=kind.value,
                name=name,
                matches=len(matches),
            )

        first = matches[0]
        scope = ScopeReference(uuid=str(first["uuid"]), display_name=first.get("displayName", name))
        logger.info("scope_resolved", scope_kind=kind.value, name=name, uuid=scope.uuid)
        return scope


__all__ = ["NameResolver", "build_search_request"]
