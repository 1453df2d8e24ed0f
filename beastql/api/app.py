"""
BeastQL HTTP application.

Mounts the GraphQL schema on a FastAPI app. The store is seeded during the
lifespan startup phase, so it is fully loaded before the first request.

Endpoints:
- POST/GET {GRAPHQL_PATH}  -> GraphQL queries and mutations (GraphiQL sandbox on GET)
- GET /health              -> liveness plus current store size

Usage:
    uvicorn beastql.api.app:create_app --factory
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from beastql.api.context import build_context
from beastql.api.schema import schema
from beastql.config import Settings, get_settings
from beastql.store.abstract import BeastStore
from beastql.store.memory import InMemoryBeastStore
from beastql.utils.logging import get_logger

log = get_logger(__name__)


def create_app(store: Optional[BeastStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Parameters
    ----------
    store : BeastStore | None
        Store to serve. When omitted, a fresh in-memory store is created and
        seeded from `settings.beast_seed_path` at startup.
    settings : Settings | None
        Effective configuration; defaults to `get_settings()`.
    """
    settings = settings or get_settings()
    seed_on_startup = store is None
    if store is None:
        store = InMemoryBeastStore(id_start=settings.beast_id_start)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if seed_on_startup:
            store.seed(settings.beast_seed_path)
        log.info(
            "BeastQL ready",
            extra={"graphql_path": settings.graphql_path, "beasts": len(store)},
        )
        yield

    async def get_context() -> Dict[str, Any]:
        return build_context(store)

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
    )

    app = FastAPI(title="BeastQL", lifespan=lifespan)
    app.include_router(graphql_router, prefix=settings.graphql_path)
    app.state.store = store

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok", "beasts": len(store)}

    return app


__all__ = ["create_app"]
