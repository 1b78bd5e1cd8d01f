"""GraphQL execution context shared by every request."""

from dataclasses import dataclass

from .config import settings
from .store import UserRecord, UserStore


@dataclass(frozen=True)
class GraphQLContext:
    """Immutable handle that resolvers use to reach the shared user store."""

    store: UserStore


def create_context(seed: bool = True) -> GraphQLContext:
    """Create a context around a fresh store, optionally holding the seed user."""
    store = UserStore()
    if seed:
        store.insert(
            UserRecord(
                id=settings.seed_user_id,
                name=settings.seed_user_name,
                email=settings.seed_user_email,
            )
        )
    return GraphQLContext(store=store)
