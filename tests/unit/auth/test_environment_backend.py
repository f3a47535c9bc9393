"""Tests for the read-only environment variable credential backend."""

import pytest

from ccauth.auth.environment import OAUTH_TOKEN_VAR
from ccauth.auth.exceptions import (
    CredentialsStorageError,
    ReadOnlyBackendError,
)
from ccauth.auth.models import CredentialId, CredentialType, StoredCredential
from ccauth.auth.storage.base import CredentialBackend
from ccauth.auth.storage.environment import (
    ENV_MAP,
    EnvironmentBackend,
    get_env_auth_token,
    get_env_base_url,
    has_env_proxy_config,
)
from ccauth.core.env import MemoryEnvStore


API_KEY_ID = CredentialId(type=CredentialType.ANTHROPIC_API_KEY)
OAUTH_ID = CredentialId(type=CredentialType.CLAUDE_OAUTH)
AUTH_TOKEN_ID = CredentialId(type=CredentialType.ANTHROPIC_AUTH_TOKEN)


def make_backend(values: dict[str, str] | None = None) -> EnvironmentBackend:
    return EnvironmentBackend(MemoryEnvStore(values))


@pytest.mark.unit
class TestBackendContract:
    """Test backend identity and availability."""

    def test_is_credential_backend(self) -> None:
        backend = make_backend()

        assert isinstance(backend, CredentialBackend)
        assert backend.name == "environment"
        assert backend.priority == 110
        assert backend.get_location() == "environment variables"

    async def test_always_available(self) -> None:
        assert await make_backend().is_available() is True


@pytest.mark.unit
class TestBackendGet:
    """Test credential resolution."""

    async def test_tool_specific_variable_wins(self) -> None:
        backend = make_backend(
            {"CRAFT_ANTHROPIC_API_KEY": "a", "ANTHROPIC_API_KEY": "b"}
        )

        credential = await backend.get(API_KEY_ID)

        assert credential == StoredCredential(value="a")

    async def test_falls_back_to_generic_variable(self) -> None:
        backend = make_backend({"ANTHROPIC_API_KEY": "b"})

        credential = await backend.get(API_KEY_ID)

        assert credential is not None
        assert credential.value == "b"

    async def test_empty_tool_specific_variable_is_skipped(self) -> None:
        backend = make_backend(
            {"CRAFT_ANTHROPIC_API_KEY": "", "ANTHROPIC_API_KEY": "b"}
        )

        credential = await backend.get(API_KEY_ID)

        assert credential is not None
        assert credential.value == "b"

    async def test_auth_token(self) -> None:
        backend = make_backend({"ANTHROPIC_AUTH_TOKEN": "proxy-token"})

        credential = await backend.get(AUTH_TOKEN_ID)

        assert credential is not None
        assert credential.value == "proxy-token"

    async def test_oauth_reads_craft_variable(self) -> None:
        backend = make_backend({"CRAFT_CLAUDE_OAUTH_TOKEN": "craft-oauth"})

        credential = await backend.get(OAUTH_ID)

        assert credential is not None
        assert credential.value == "craft-oauth"

    async def test_oauth_ignores_configurator_variable(self) -> None:
        backend = make_backend({OAUTH_TOKEN_VAR: "cli-oauth"})

        assert await backend.get(OAUTH_ID) is None

    async def test_workspace_scoped_id_not_found(self) -> None:
        backend = make_backend(
            {"CRAFT_ANTHROPIC_API_KEY": "a", "ANTHROPIC_API_KEY": "b"}
        )
        scoped = CredentialId(
            type=CredentialType.ANTHROPIC_API_KEY, workspace_id="ws-123"
        )

        assert await backend.get(scoped) is None

    async def test_unmapped_type_not_found(self) -> None:
        backend = make_backend({"OPENAI_API_KEY": "sk-openai"})

        assert await backend.get(CredentialId(type=CredentialType.OPENAI_API_KEY)) is None

    async def test_missing_value_not_found(self) -> None:
        assert await make_backend().get(API_KEY_ID) is None

    async def test_camel_case_identity(self) -> None:
        backend = make_backend({"ANTHROPIC_API_KEY": "b"})
        scoped = CredentialId.model_validate(
            {"type": "anthropic_api_key", "workspaceId": "ws-1"}
        )

        assert await backend.get(scoped) is None


@pytest.mark.unit
class TestBackendIsReadOnly:
    """Test that writes are rejected and deletes are no-ops."""

    @pytest.mark.parametrize("credential_id", [API_KEY_ID, OAUTH_ID, AUTH_TOKEN_ID])
    async def test_set_raises(self, credential_id: CredentialId) -> None:
        backend = make_backend()

        with pytest.raises(ReadOnlyBackendError, match="read-only"):
            await backend.set(credential_id, StoredCredential(value="new"))

    async def test_set_error_hierarchy(self) -> None:
        with pytest.raises(CredentialsStorageError) as exc_info:
            await make_backend().set(API_KEY_ID, StoredCredential(value="new"))

        assert isinstance(exc_info.value, NotImplementedError)
        assert exc_info.value.backend_name == "environment"

    async def test_set_does_not_touch_environment(self) -> None:
        env = MemoryEnvStore({"ANTHROPIC_API_KEY": "b"})
        backend = EnvironmentBackend(env)

        with pytest.raises(ReadOnlyBackendError):
            await backend.set(API_KEY_ID, StoredCredential(value="new"))

        assert env.snapshot() == {"ANTHROPIC_API_KEY": "b"}

    async def test_delete_returns_false(self) -> None:
        env = MemoryEnvStore({"ANTHROPIC_API_KEY": "b"})
        backend = EnvironmentBackend(env)

        assert await backend.delete(API_KEY_ID) is False
        assert env.get("ANTHROPIC_API_KEY") == "b"


@pytest.mark.unit
class TestBackendList:
    """Test listing resolvable credential identities."""

    async def test_only_auth_token(self) -> None:
        backend = make_backend({"ANTHROPIC_AUTH_TOKEN": "tok"})

        assert await backend.list() == [
            CredentialId(type=CredentialType.ANTHROPIC_AUTH_TOKEN)
        ]

    async def test_all_types_in_map_order(self) -> None:
        backend = make_backend(
            {
                "ANTHROPIC_AUTH_TOKEN": "tok",
                "CRAFT_CLAUDE_OAUTH_TOKEN": "oauth",
                "ANTHROPIC_API_KEY": "key",
            }
        )

        ids = await backend.list()

        assert [credential_id.type for credential_id in ids] == list(ENV_MAP)
        assert all(credential_id.workspace_id is None for credential_id in ids)

    async def test_empty_values_are_not_listed(self) -> None:
        backend = make_backend(
            {"ANTHROPIC_AUTH_TOKEN": "", "CRAFT_ANTHROPIC_API_KEY": ""}
        )

        assert await backend.list() == []

    async def test_filter_is_ignored(self) -> None:
        backend = make_backend({"ANTHROPIC_API_KEY": "key"})

        ids = await backend.list({"type": "claude_oauth", "workspace_id": "ws-1"})

        assert ids == [CredentialId(type=CredentialType.ANTHROPIC_API_KEY)]

    async def test_identities_never_carry_values(self) -> None:
        backend = make_backend({"ANTHROPIC_API_KEY": "sk-secret-value"})

        ids = await backend.list()

        assert "sk-secret-value" not in repr(ids)


@pytest.mark.unit
class TestEnvHelpers:
    """Test the free helper functions."""

    def test_passthrough_reads(self) -> None:
        env = MemoryEnvStore(
            {
                "ANTHROPIC_BASE_URL": "https://proxy.example.com",
                "ANTHROPIC_AUTH_TOKEN": "tok",
            }
        )

        assert get_env_base_url(env) == "https://proxy.example.com"
        assert get_env_auth_token(env) == "tok"

    def test_passthrough_reads_unset(self) -> None:
        env = MemoryEnvStore()

        assert get_env_base_url(env) is None
        assert get_env_auth_token(env) is None

    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ({"ANTHROPIC_BASE_URL": "https://p"}, False),
            ({"ANTHROPIC_BASE_URL": "https://p", "ANTHROPIC_AUTH_TOKEN": "t"}, True),
            ({"ANTHROPIC_BASE_URL": "https://p", "ANTHROPIC_API_KEY": "k"}, True),
            ({"ANTHROPIC_AUTH_TOKEN": "t", "ANTHROPIC_API_KEY": "k"}, False),
        ],
    )
    def test_has_env_proxy_config(self, values: dict[str, str], expected: bool) -> None:
        assert has_env_proxy_config(MemoryEnvStore(values)) is expected

    async def test_default_store_is_process_environment(
        self, clean_process_env: pytest.MonkeyPatch
    ) -> None:
        clean_process_env.setenv("CRAFT_ANTHROPIC_API_KEY", "a")
        clean_process_env.setenv("ANTHROPIC_API_KEY", "b")
        clean_process_env.setenv("ANTHROPIC_BASE_URL", "https://proxy.example.com")

        credential = await EnvironmentBackend().get(API_KEY_ID)

        assert credential is not None
        assert credential.value == "a"
        assert has_env_proxy_config()
        assert get_env_base_url() == "https://proxy.example.com"
        assert get_env_auth_token() is None
