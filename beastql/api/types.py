"""
GraphQL object types for BeastQL.

`BeastType` is the externally visible shape of a beast. Every field is
nullable, matching `id: Int, name: String, description: String,
otherNames: [String], imageUrl: String`.
"""

from typing import List, Optional

import strawberry

from beastql.domain.models import Beast


@strawberry.type(name="Beast", description="A cryptid record.")
class BeastType:
    id: Optional[int]
    name: Optional[str]
    description: Optional[str]
    other_names: Optional[List[Optional[str]]]
    image_url: Optional[str]

    @classmethod
    def from_domain(cls, beast: Beast) -> "BeastType":
        return cls(
            id=beast.id,
            name=beast.name,
            description=beast.description,
            other_names=list(beast.other_names),
            image_url=beast.image_url,
        )


__all__ = ["BeastType"]
