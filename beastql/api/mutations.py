"""
Root mutation resolvers.

`addBeast` always creates a record with a fresh identifier. `updateBeast`
overwrites only the arguments the client actually sent: an omitted argument
(or one sent as explicit null) leaves the stored value alone.
"""

from typing import Any, Dict, List, Optional

import strawberry
from strawberry.types import Info

from beastql.api.context import get_store
from beastql.api.types import BeastType


def _is_present(value: Any) -> bool:
    return value is not strawberry.UNSET and value is not None


def _clean_names(names: List[Optional[str]]) -> List[str]:
    return [name for name in names if name is not None]


@strawberry.type(name="RootMutation")
class Mutation:
    @strawberry.mutation(description="add a new beast")
    def add_beast(
        self,
        info: Info,
        name: str,
        description: str,
        other_names: Optional[List[Optional[str]]] = strawberry.UNSET,
        image_url: Optional[str] = strawberry.UNSET,
    ) -> Optional[BeastType]:
        beast = get_store(info).add(
            name=name,
            description=description,
            other_names=_clean_names(other_names) if _is_present(other_names) else [],
            image_url=image_url if _is_present(image_url) else "",
        )
        return BeastType.from_domain(beast)

    @strawberry.mutation(description="Update existing beast")
    def update_beast(
        self,
        info: Info,
        id: int,  # noqa: A002 - GraphQL argument name
        name: Optional[str] = strawberry.UNSET,
        description: Optional[str] = strawberry.UNSET,
        other_names: Optional[List[Optional[str]]] = strawberry.UNSET,
        image_url: Optional[str] = strawberry.UNSET,
    ) -> Optional[BeastType]:
        fields: Dict[str, Any] = {}
        if _is_present(name):
            fields["name"] = name
        if _is_present(description):
            fields["description"] = description
        if _is_present(other_names):
            fields["other_names"] = _clean_names(other_names)
        if _is_present(image_url):
            fields["image_url"] = image_url

        return BeastType.from_domain(get_store(info).update_fields(id, fields))


__all__ = ["Mutation"]
