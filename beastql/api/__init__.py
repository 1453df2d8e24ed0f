"""
GraphQL API package for BeastQL.

Re-exports the assembled schema and helpers. The FastAPI app factory lives in
`beastql.api.app` and is imported lazily by the CLI.
"""

from beastql.api.context import build_context, get_store
from beastql.api.mutations import Mutation
from beastql.api.queries import Query
from beastql.api.schema import execute, print_schema_sdl, schema
from beastql.api.types import BeastType

__all__ = [
    "BeastType",
    "Mutation",
    "Query",
    "build_context",
    "execute",
    "get_store",
    "print_schema_sdl",
    "schema",
]
