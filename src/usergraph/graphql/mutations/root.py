"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    def create_user(self, info: strawberry.Info, id: str, name: str, email: str) -> User:
        """Create a user, replacing any existing user with the same ID."""
        from ..resolvers.user import create_user

        return create_user(info, id, name, email)
