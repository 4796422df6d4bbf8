"""
Core domain exceptions.

These exceptions are transport-agnostic and should be caught by the server
and CLI layers to convert into responses and user-facing messages.
"""


class CoreError(Exception):
    """Base exception for all core errors."""

    pass


class NotFoundError(CoreError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidOperationError(CoreError):
    """Raised when an operation cannot be performed in the current state."""

    pass


class RemoteStoreError(CoreError):
    """Raised when the remote config store rejects or fails a request."""

    pass


class MissingCredentialsError(RemoteStoreError):
    """Raised when the remote store is used before it is configured."""

    pass


class AuthenticationError(RemoteStoreError):
    """Raised when the remote store rejects the access token."""

    pass


class DocumentNotFoundError(RemoteStoreError):
    """Raised when the remote document or its config file does not exist."""

    pass


class WriterUnavailableError(CoreError):
    """Raised when the local config writer cannot perform a direct save."""

    pass
