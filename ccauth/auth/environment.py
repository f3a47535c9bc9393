"""Auth environment variable management.

Switching between authentication modes means replacing one set of
environment variables with another. Four variables form a single mutually
exclusive register: after a mode is applied, only the variables that mode
needs are populated.

Supported modes:
- Standard API key authentication, optionally against a custom base URL
- Claude subscription OAuth token authentication
- Proxy/custom API authentication with ANTHROPIC_BASE_URL plus
  ANTHROPIC_AUTH_TOKEN and/or ANTHROPIC_API_KEY
"""

from ccauth.auth.models import ApiKeyAuth, AuthCredentials, OAuthTokenAuth, ProxyAuth
from ccauth.core.env import EnvStore, resolve_env
from ccauth.core.logging import get_logger


__all__ = [
    "API_KEY_VAR",
    "AUTH_TOKEN_VAR",
    "BASE_URL_VAR",
    "OAUTH_TOKEN_VAR",
    "MANAGED_AUTH_VARS",
    "set_auth_environment",
    "clear_auth_environment",
    "is_proxy_auth_configured",
    "has_proxy_config",
]


logger = get_logger(__name__)

API_KEY_VAR = "ANTHROPIC_API_KEY"
# Written for the CLI client. The credential backend reads
# CRAFT_CLAUDE_OAUTH_TOKEN instead; the two names are kept distinct.
OAUTH_TOKEN_VAR = "CLAUDE_CODE_OAUTH_TOKEN"
AUTH_TOKEN_VAR = "ANTHROPIC_AUTH_TOKEN"
BASE_URL_VAR = "ANTHROPIC_BASE_URL"

MANAGED_AUTH_VARS: tuple[str, ...] = (
    API_KEY_VAR,
    OAUTH_TOKEN_VAR,
    AUTH_TOKEN_VAR,
    BASE_URL_VAR,
)


def has_proxy_config(env: EnvStore | None = None) -> bool:
    """Check whether the environment describes proxy authentication.

    Proxy authentication needs a base URL plus an auth token or an API key.

    Args:
        env: Environment store, defaults to the process environment

    Returns:
        True if ANTHROPIC_BASE_URL is non-empty and either ANTHROPIC_AUTH_TOKEN
        or ANTHROPIC_API_KEY is non-empty
    """
    env = resolve_env(env)
    return bool(env.get(BASE_URL_VAR)) and bool(
        env.get(AUTH_TOKEN_VAR) or env.get(API_KEY_VAR)
    )


def clear_auth_environment(env: EnvStore | None = None) -> None:
    """Clear all auth-related environment variables."""
    env = resolve_env(env)
    for name in MANAGED_AUTH_VARS:
        env.delete(name)
    logger.debug("auth_environment_cleared", variables=list(MANAGED_AUTH_VARS))


def set_auth_environment(auth: AuthCredentials, env: EnvStore | None = None) -> None:
    """Set environment variables for the specified auth mode.

    Every managed variable is cleared first, then only the variables for the
    selected mode are set. Values are written as given; validation is left to
    the caller.

    Args:
        auth: The auth mode and credentials to configure
        env: Environment store, defaults to the process environment

    Raises:
        TypeError: If auth is not one of the supported auth modes
        ValueError: If the process environment rejects a value, such as one
            containing a NUL byte. The managed variables have already been
            cleared when this is raised.
    """
    env = resolve_env(env)
    clear_auth_environment(env)

    if isinstance(auth, ApiKeyAuth):
        env.set(API_KEY_VAR, auth.credentials.get_api_key())
        if auth.credentials.base_url:
            env.set(BASE_URL_VAR, auth.credentials.base_url)

    elif isinstance(auth, OAuthTokenAuth):
        # OAuth never combines with a custom base URL
        env.set(OAUTH_TOKEN_VAR, auth.credentials.get_oauth_token())

    elif isinstance(auth, ProxyAuth):
        env.set(BASE_URL_VAR, auth.credentials.base_url)
        auth_token = auth.credentials.get_auth_token()
        if auth_token:
            env.set(AUTH_TOKEN_VAR, auth_token)
        api_key = auth.credentials.get_api_key()
        if api_key:
            env.set(API_KEY_VAR, api_key)

    else:
        raise TypeError(f"Unsupported auth credentials: {type(auth).__name__}")

    logger.info(
        "auth_environment_set",
        auth_type=auth.type,
        variables=[name for name in MANAGED_AUTH_VARS if env.get(name) is not None],
    )


def is_proxy_auth_configured(env: EnvStore | None = None) -> bool:
    """Check if proxy authentication is configured via environment variables."""
    return has_proxy_config(env)
