"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class UnauthorizedError(UserDomainError):
    """No verified caller identity is present on the request."""

    def __init__(self, reason: str = "Unauthorized"):
        self.reason = reason
        super().__init__(reason)


class UserNotFoundError(UserDomainError):
    """User was not found in the repository.

    Raised both for unknown user ids and for verified subjects whose
    provisioning step never ran (onboarding not completed).
    """

    def __init__(self, identifier: str):
        """Initialize with user identifier.

        Args:
            identifier: User ID or external subject that was not found
        """
        self.identifier = identifier
        super().__init__(f"User not found: {identifier}")


class UserAlreadyExistsError(UserDomainError):
    """A user is already provisioned for this external subject.

    Raised by repositories when an insert collides with an existing
    subject, e.g. two concurrent provisioning calls.
    """

    def __init__(self, external_subject: str):
        self.external_subject = external_subject
        super().__init__(f"User already exists: {external_subject}")
