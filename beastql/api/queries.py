"""
Root query resolvers.

Both resolvers are read-only. A lookup miss yields the empty beast rather than
null so clients always receive an object.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from beastql.api.context import get_store
from beastql.api.types import BeastType
from beastql.domain.models import Beast
from beastql.utils.logging import get_logger

log = get_logger(__name__)


@strawberry.type(name="RootQuery")
class Query:
    @strawberry.field(description="Get single beast")
    def beast(self, info: Info, name: Optional[str] = strawberry.UNSET) -> Optional[BeastType]:
        if name is strawberry.UNSET or name is None:
            return BeastType.from_domain(Beast.empty())

        found = get_store(info).find_by_name(name)
        if found is None:
            log.debug("Beast lookup missed", extra={"beast_name": name})
            return BeastType.from_domain(Beast.empty())
        return BeastType.from_domain(found)

    @strawberry.field(description="List of beasts")
    def beast_list(self, info: Info) -> Optional[List[Optional[BeastType]]]:
        return [BeastType.from_domain(beast) for beast in get_store(info).all()]


__all__ = ["Query"]
