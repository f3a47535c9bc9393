"""Environment variable credential backend.

Read-only backend for server and container deployments. Reads credentials
from environment variables.

Supported variables (in priority order):
    CRAFT_ANTHROPIC_API_KEY or ANTHROPIC_API_KEY - Anthropic API key
    CRAFT_CLAUDE_OAUTH_TOKEN - Claude OAuth token
    ANTHROPIC_AUTH_TOKEN - Third-party proxy auth token (used with ANTHROPIC_BASE_URL)
    ANTHROPIC_BASE_URL - Custom API base URL for proxy services

Workspace-scoped credentials are not served from environment variables; use
the file backend for those.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ccauth.auth.environment import AUTH_TOKEN_VAR, BASE_URL_VAR, has_proxy_config
from ccauth.auth.exceptions import ReadOnlyBackendError
from ccauth.auth.models import CredentialId, CredentialType, StoredCredential
from ccauth.auth.storage.base import CredentialBackend
from ccauth.core.env import EnvStore, resolve_env
from ccauth.core.logging import get_logger


logger = get_logger(__name__)


# Credential type -> env var names, first non-empty wins
ENV_MAP: dict[CredentialType, tuple[str, ...]] = {
    CredentialType.ANTHROPIC_API_KEY: ("CRAFT_ANTHROPIC_API_KEY", "ANTHROPIC_API_KEY"),
    # Not CLAUDE_CODE_OAUTH_TOKEN, which is what set_auth_environment writes
    CredentialType.CLAUDE_OAUTH: ("CRAFT_CLAUDE_OAUTH_TOKEN",),
    CredentialType.ANTHROPIC_AUTH_TOKEN: (AUTH_TOKEN_VAR,),
}


def has_env_proxy_config(env: EnvStore | None = None) -> bool:
    """Check if environment variables indicate proxy/custom API usage."""
    return has_proxy_config(env)


def get_env_base_url(env: EnvStore | None = None) -> str | None:
    """Get the configured base URL for the Anthropic API."""
    return resolve_env(env).get(BASE_URL_VAR)


def get_env_auth_token(env: EnvStore | None = None) -> str | None:
    """Get the auth token for proxy services."""
    return resolve_env(env).get(AUTH_TOKEN_VAR)


def _first_env_value(env: EnvStore, names: Sequence[str]) -> tuple[str, str] | None:
    for name in names:
        value = env.get(name)
        if value:
            return name, value
    return None


class EnvironmentBackend(CredentialBackend):
    """Read-only credential backend over environment variables.

    Only global credentials are served. Its priority is above the file
    backend's so environment variables override file storage.
    """

    name = "environment"
    priority = 110

    def __init__(self, env: EnvStore | None = None):
        """Initialize the backend.

        Args:
            env: Environment store, defaults to the process environment
        """
        self._env = resolve_env(env)

    async def is_available(self) -> bool:
        return True

    async def get(self, id: CredentialId) -> StoredCredential | None:
        """Resolve a global credential from the first non-empty mapped variable.

        Returns None for workspace-scoped identities, unmapped types and
        unset variables.
        """
        if id.workspace_id:
            logger.debug(
                "credential_scope_unsupported",
                backend=self.name,
                credential_type=id.type.value,
            )
            return None

        names = ENV_MAP.get(id.type)
        if not names:
            return None

        found = _first_env_value(self._env, names)
        if found is None:
            return None

        source, value = found
        logger.debug(
            "credential_resolved",
            backend=self.name,
            credential_type=id.type.value,
            source=source,
        )
        return StoredCredential(value=value)

    async def set(self, id: CredentialId, credential: StoredCredential) -> None:
        raise ReadOnlyBackendError(self.name)

    async def delete(self, id: CredentialId) -> bool:
        return False

    async def list(
        self, filter: Mapping[str, Any] | None = None
    ) -> list[CredentialId]:
        """List credential types with a non-empty mapped variable.

        ``filter`` is accepted for interface compatibility and ignored.
        """
        return [
            CredentialId(type=credential_type)
            for credential_type, names in ENV_MAP.items()
            if _first_env_value(self._env, names) is not None
        ]

    def get_location(self) -> str:
        return "environment variables"
