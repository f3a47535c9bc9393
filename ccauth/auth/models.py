"""Data models for authentication modes and stored credentials."""

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, TypeAdapter


def mask_secret(value: str | None) -> str:
    """Return a display-safe preview of a secret."""
    if not value:
        return "None"
    return f"{value[:8]}...{value[-8:]}" if len(value) > 16 else "***"


def _reveal(value: SecretStr | None) -> str | None:
    return value.get_secret_value() if value is not None else None


class CredentialType(str, Enum):
    """Credential kinds known to the credential-resolution layer.

    Only the Anthropic and Claude types are served from environment
    variables; the remaining types exist for other backends.
    """

    ANTHROPIC_API_KEY = "anthropic_api_key"
    CLAUDE_OAUTH = "claude_oauth"
    ANTHROPIC_AUTH_TOKEN = "anthropic_auth_token"
    OPENAI_API_KEY = "openai_api_key"
    SOURCE_OAUTH = "source_oauth"
    SOURCE_BEARER = "source_bearer"
    SOURCE_APIKEY = "source_apikey"
    SOURCE_BASIC = "source_basic"


class CredentialId(BaseModel):
    """Identity of a stored credential.

    A credential without ``workspace_id`` is global.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: CredentialType
    workspace_id: str | None = Field(None, alias="workspaceId")

    @property
    def is_global(self) -> bool:
        return self.workspace_id is None


class StoredCredential(BaseModel):
    """A resolved secret."""

    model_config = ConfigDict(populate_by_name=True)

    value: str
    refresh_token: str | None = Field(None, alias="refreshToken")
    expires_at: int | None = Field(None, alias="expiresAt")

    def __repr__(self) -> str:
        """Safe string representation that masks sensitive values."""
        return (
            f"StoredCredential(value='{mask_secret(self.value)}', "
            f"refresh_token='{mask_secret(self.refresh_token)}', "
            f"expires_at={self.expires_at})"
        )

    __str__ = __repr__


# === Authentication modes ===


class ApiKeyCredentials(BaseModel):
    """Direct API key authentication with an optional custom endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: SecretStr = Field(..., alias="apiKey")
    base_url: str | None = Field(None, alias="baseUrl")

    def get_api_key(self) -> str:
        return self.api_key.get_secret_value()


class OAuthTokenCredentials(BaseModel):
    """OAuth bearer token authentication (Claude subscription)."""

    model_config = ConfigDict(populate_by_name=True)

    oauth_token: SecretStr = Field(..., alias="oauthToken")

    def get_oauth_token(self) -> str:
        return self.oauth_token.get_secret_value()


class ProxyCredentials(BaseModel):
    """Third-party proxy authentication.

    At least one of ``auth_token`` or ``api_key`` is expected but not enforced.
    """

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(..., alias="baseUrl")
    auth_token: SecretStr | None = Field(None, alias="authToken")
    api_key: SecretStr | None = Field(None, alias="apiKey")

    def get_auth_token(self) -> str | None:
        return _reveal(self.auth_token)

    def get_api_key(self) -> str | None:
        return _reveal(self.api_key)


class ApiKeyAuth(BaseModel):
    type: Literal["api_key"] = "api_key"
    credentials: ApiKeyCredentials


class OAuthTokenAuth(BaseModel):
    type: Literal["oauth_token"] = "oauth_token"
    credentials: OAuthTokenCredentials


class ProxyAuth(BaseModel):
    type: Literal["proxy"] = "proxy"
    credentials: ProxyCredentials


AuthCredentials = Annotated[
    ApiKeyAuth | OAuthTokenAuth | ProxyAuth,
    Field(discriminator="type"),
]

_auth_credentials_adapter: TypeAdapter[Any] = TypeAdapter(AuthCredentials)


def parse_auth_credentials(
    data: Mapping[str, Any],
) -> ApiKeyAuth | OAuthTokenAuth | ProxyAuth:
    """Validate a plain mapping into one of the authentication modes.

    Args:
        data: Mapping like ``{"type": "proxy", "credentials": {"baseUrl": ...}}``

    Returns:
        The matching authentication mode model

    Raises:
        pydantic.ValidationError: If the tag is unknown or required fields are missing
    """
    return _auth_credentials_adapter.validate_python(dict(data))  # type: ignore[no-any-return]
