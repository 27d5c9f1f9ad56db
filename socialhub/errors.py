"""Domain error taxonomy.

Every error carries the HTTP status it maps to, so the API layer renders
them without knowing which service raised them. Recipient-offline is not an
error at all; see ``socialhub.realtime.emitter.DeliveryOutcome``.
"""


class SocialHubError(Exception):
    """Base class for errors surfaced to HTTP callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SocialHubError):
    """Malformed identity, empty text, missing field."""

    status_code = 400


class ConflictError(SocialHubError):
    """The request collides with existing state (duplicate email, already liked)."""

    status_code = 400


class AuthenticationError(SocialHubError):
    """Missing, invalid, or expired credentials."""

    status_code = 401


class TokenExpiredError(AuthenticationError):
    """A well-formed token whose lifetime has passed."""


class PermissionDeniedError(SocialHubError):
    """Authenticated, but not allowed to touch this record."""

    status_code = 403


class NotFoundError(SocialHubError):
    """Referenced user, post, or conversation does not exist."""

    status_code = 404


class StorageError(SocialHubError):
    """Persistence layer unavailable or a write failed."""

    status_code = 500
