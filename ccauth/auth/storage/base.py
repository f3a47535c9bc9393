"""Abstract base class for credential backends."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ccauth.auth.models import CredentialId, StoredCredential


class CredentialBackend(ABC):
    """Abstract interface for a pluggable credential backend.

    A resolver queries every available backend and, when several provide a
    value for the same credential, prefers the one with the higher
    ``priority``. The file backend uses 100.
    """

    name: str
    priority: int

    @abstractmethod
    async def is_available(self) -> bool:
        """Check whether this backend can be used in the current environment.

        Returns:
            True if the backend is usable, False otherwise
        """
        pass

    @abstractmethod
    async def get(self, id: CredentialId) -> StoredCredential | None:
        """Load a credential.

        Args:
            id: Identity of the credential to load

        Returns:
            The stored credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def set(self, id: CredentialId, credential: StoredCredential) -> None:
        """Store a credential.

        Args:
            id: Identity of the credential to store
            credential: Credential to store

        Raises:
            CredentialsStorageError: If the credential cannot be stored
        """
        pass

    @abstractmethod
    async def delete(self, id: CredentialId) -> bool:
        """Delete a credential.

        Args:
            id: Identity of the credential to delete

        Returns:
            True if deleted, False otherwise
        """
        pass

    @abstractmethod
    async def list(
        self, filter: Mapping[str, Any] | None = None
    ) -> list[CredentialId]:
        """List identities of stored credentials.

        Args:
            filter: Optional partial identity (``type``, ``workspace_id``) to
                narrow the result

        Returns:
            Credential identities, never values
        """
        pass

    def get_location(self) -> str:
        """Get the storage location description.

        Returns:
            Human-readable description of where credentials are stored
        """
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"
