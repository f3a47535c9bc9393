"""Credential backend implementations."""

from ccauth.auth.storage.base import CredentialBackend
from ccauth.auth.storage.environment import (
    ENV_MAP,
    EnvironmentBackend,
    get_env_auth_token,
    get_env_base_url,
    has_env_proxy_config,
)


__all__ = [
    "CredentialBackend",
    "ENV_MAP",
    "EnvironmentBackend",
    "get_env_auth_token",
    "get_env_base_url",
    "has_env_proxy_config",
]
