"""Authentication mode switching and environment-backed credentials."""

from ccauth.auth.environment import (
    MANAGED_AUTH_VARS,
    clear_auth_environment,
    has_proxy_config,
    is_proxy_auth_configured,
    set_auth_environment,
)
from ccauth.auth.exceptions import (
    CredentialsError,
    CredentialsNotFoundError,
    CredentialsStorageError,
    ReadOnlyBackendError,
)
from ccauth.auth.models import (
    ApiKeyAuth,
    ApiKeyCredentials,
    AuthCredentials,
    CredentialId,
    CredentialType,
    OAuthTokenAuth,
    OAuthTokenCredentials,
    ProxyAuth,
    ProxyCredentials,
    StoredCredential,
    parse_auth_credentials,
)
from ccauth.auth.storage import CredentialBackend, EnvironmentBackend


__all__ = [
    # Environment configuration
    "MANAGED_AUTH_VARS",
    "set_auth_environment",
    "clear_auth_environment",
    "is_proxy_auth_configured",
    "has_proxy_config",
    # Models
    "AuthCredentials",
    "ApiKeyAuth",
    "ApiKeyCredentials",
    "OAuthTokenAuth",
    "OAuthTokenCredentials",
    "ProxyAuth",
    "ProxyCredentials",
    "CredentialId",
    "CredentialType",
    "StoredCredential",
    "parse_auth_credentials",
    # Backends
    "CredentialBackend",
    "EnvironmentBackend",
    # Exceptions
    "CredentialsError",
    "CredentialsNotFoundError",
    "CredentialsStorageError",
    "ReadOnlyBackendError",
]
