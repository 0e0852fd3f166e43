"""
Domain error taxonomy.

Services raise these; the application factory maps each one to an HTTP
response carrying ``{"error": message}`` and the class's ``status_code``.
"Not found" on reads is signalled by returning ``None`` instead.
"""

from fastapi import status


class CivicLinkError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CivicLinkError):
    """Malformed or missing caller input."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidIdentifierError(ValidationError):
    """An identifier is not a well-formed UUID."""

    def __init__(self, field: str, value: object):
        super().__init__(f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value


class InvalidRecipientError(ValidationError):
    """Message recipient does not exist or lacks an elevated role."""

    def __init__(self, message: str = "Recipient is not a valid representative or staff member"):
        super().__init__(message)


class PetitionClosedError(ValidationError):
    """Petition is no longer accepting signatures."""


class DuplicateSignatureError(ValidationError):
    """User has already signed the petition."""

    def __init__(self, message: str = "You have already signed this petition"):
        super().__init__(message)


class NotFoundError(CivicLinkError):
    """A required entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class AuthorizationError(CivicLinkError):
    """Caller is not permitted to perform the mutation."""

    status_code = status.HTTP_403_FORBIDDEN
