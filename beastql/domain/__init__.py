"""
Domain package for BeastQL.

Exports the core domain model used by the store and the GraphQL layer.
Keep this package focused on data definitions and validation concerns.
"""

from beastql.domain.models import MUTABLE_FIELDS, Beast

__all__ = [
    "Beast",
    "MUTABLE_FIELDS",
]
