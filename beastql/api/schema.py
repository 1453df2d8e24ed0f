"""
Schema assembly: the `Beast` type plus root query and mutation types.

Usage:
    from beastql.api.schema import execute, schema

    result = execute("{ beastList { id name } }", store)
    print(result.data)
"""

from typing import Any, Dict, Optional

import strawberry
from strawberry.types import ExecutionResult

from beastql.api.context import build_context
from beastql.api.mutations import Mutation
from beastql.api.queries import Query
from beastql.store.abstract import BeastStore

schema = strawberry.Schema(query=Query, mutation=Mutation)


def execute(
    query: str,
    store: BeastStore,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> ExecutionResult:
    """
    Run a query or mutation synchronously against `store`.

    Parameters
    ----------
    query : str
        GraphQL document text.
    store : BeastStore
        Store exposed to resolvers through the execution context.
    variables : dict | None
        Variable values for the operation.
    operation_name : str | None
        Operation to run when the document defines several.
    """
    return schema.execute_sync(
        query,
        variable_values=variables,
        context_value=build_context(store),
        operation_name=operation_name,
    )


def print_schema_sdl() -> str:
    """Return the schema in GraphQL SDL form."""
    return schema.as_str()


__all__ = ["execute", "print_schema_sdl", "schema"]
