"""Custom exceptions for credential handling."""


class CredentialsError(Exception):
    """Base exception for all credential-related errors."""

    pass


class CredentialsNotFoundError(CredentialsError):
    """Raised when credentials cannot be found in any configured location."""

    pass


class CredentialsStorageError(CredentialsError):
    """Raised when there's an error reading or writing credentials."""

    pass


class ReadOnlyBackendError(CredentialsStorageError, NotImplementedError):
    """Raised when a write is attempted against a read-only credential backend."""

    def __init__(self, backend_name: str):
        self.backend_name = backend_name
        super().__init__(f"{backend_name.capitalize()} backend is read-only")
