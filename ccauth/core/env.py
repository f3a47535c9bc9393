"""Key/value environment stores.

Authentication state lives in environment variables. Code that reads or writes
it receives an ``EnvStore`` instead of touching ``os.environ`` directly, so
tests and embedding callers can supply an isolated store.
"""

import os
from collections.abc import Iterator, Mapping
from typing import Protocol, runtime_checkable


__all__ = [
    "EnvStore",
    "ProcessEnvStore",
    "MemoryEnvStore",
    "get_default_env",
    "resolve_env",
]


@runtime_checkable
class EnvStore(Protocol):
    """Protocol for a mutable string-to-string environment table."""

    def get(self, name: str) -> str | None:
        """Return the value of ``name`` or None when unset."""
        ...

    def set(self, name: str, value: str) -> None:
        """Set ``name`` to ``value``, replacing any existing value."""
        ...

    def delete(self, name: str) -> None:
        """Remove ``name``. Missing names are ignored."""
        ...


class ProcessEnvStore:
    """Live view over the process environment."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def delete(self, name: str) -> None:
        os.environ.pop(name, None)

    def __repr__(self) -> str:
        return "ProcessEnvStore()"


class MemoryEnvStore:
    """In-memory environment table.

    Args:
        initial: Optional mapping copied into the store on creation
    """

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def delete(self, name: str) -> None:
        self._values.pop(name, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current contents."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        # Names only; values are secrets
        return f"MemoryEnvStore(names={sorted(self._values)})"


_process_env = ProcessEnvStore()


def get_default_env() -> EnvStore:
    """Get the store backed by the real process environment."""
    return _process_env


def resolve_env(env: EnvStore | None) -> EnvStore:
    """Return ``env``, or the process environment store when it is None."""
    return env if env is not None else _process_env
