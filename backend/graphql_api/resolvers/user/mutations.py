"""User domain GraphQL mutations."""

from typing import Optional
import strawberry
from strawberry.types import Info

from application.user.commands.create_user import CreateUserCommand
from application.user.commands.update_profile import UpdateProfileCommand
from domain.user.core.value_objects.external_subject import ExternalSubject


@strawberry.type
class UserMutations:
    """User domain mutations.

    Examples:
        mutation {
          user {
            createUser(
              username: "jane"
              fullname: "Jane Doe"
              image: "https://img.example.com/jane.png"
              email: "jane@example.com"
              clerkId: "user_2abc"
            )
          }
        }
    """

    @strawberry.mutation
    async def create_user(
        self,
        info: Info,
        username: str,
        fullname: str,
        image: str,
        email: str,
        clerk_id: str,
        bio: Optional[str] = None,
    ) -> bool:
        """Provision the local record for a signed-in user.

        Idempotent by clerkId: repeated calls leave the first record
        untouched. Called by the sign-up webhook, so no bearer token is
        required.
        """
        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise RuntimeError("user_repository not found in context")

        command = CreateUserCommand(
            repository=user_repository,
            event_bus=info.context.get("event_bus"),
        )
        await command.execute(
            username=username,
            full_name=fullname,
            image=image,
            email=email,
            external_subject=ExternalSubject(clerk_id),
            bio=bio,
        )
        return True

    @strawberry.mutation
    async def update_profile(
        self,
        info: Info,
        fullname: str,
        bio: Optional[str] = None,
    ) -> bool:
        """Update the caller's full name and bio.

        Omitting ``bio`` clears it.

        Raises:
            UnauthorizedError: No verified identity on the request
            UserNotFoundError: Caller not provisioned
        """
        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise RuntimeError("user_repository not found in context")

        command = UpdateProfileCommand(
            repository=user_repository,
            event_bus=info.context.get("event_bus"),
        )
        await command.execute(
            info.context.get("caller_identity"),
            full_name=fullname,
            bio=bio,
        )
        return True
