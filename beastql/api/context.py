"""
Execution context helpers.

Resolvers never reach for a module-level store; the store travels in the
GraphQL context under the `store` key.
"""

from typing import Any, Dict

from strawberry.types import Info

from beastql.errors import StoreUnavailableError
from beastql.store.abstract import BeastStore

STORE_KEY = "store"


def build_context(store: BeastStore) -> Dict[str, Any]:
    return {STORE_KEY: store}


def get_store(info: Info) -> BeastStore:
    context = info.context
    store = context.get(STORE_KEY) if isinstance(context, dict) else getattr(context, STORE_KEY, None)
    if store is None:
        raise StoreUnavailableError("GraphQL context has no beast store")
    return store


__all__ = ["STORE_KEY", "build_context", "get_store"]
