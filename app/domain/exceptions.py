"""Domain-level exceptions raised by repositories and use cases."""


class UserStoreError(RuntimeError):
    """The persistence store failed to complete an operation."""


class UserNotFoundError(LookupError):
    """No user exists with the requested ID."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User with ID {user_id} not found")
        self.user_id = user_id
