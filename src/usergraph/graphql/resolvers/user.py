from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import UserRecord
from ..types.user import User

if TYPE_CHECKING:
    from ...context import GraphQLContext

logger = get_logger(__name__)


def resolve_user_by_id(info: strawberry.Info, id: str) -> User | None:
    context: GraphQLContext = info.context
    record = context.store.lookup(id)
    if record is None:
        logger.debug("User not found", user_id=id)
        return None
    return User.from_record(record)


def create_user(info: strawberry.Info, id: str, name: str, email: str) -> User:
    context: GraphQLContext = info.context
    record = UserRecord(id=id, name=name, email=email)
    context.store.insert(record)
    logger.info("User created", user_id=id)
    return User.from_record(record)
