"""
Credential provisioning

The analysis pipeline never reads API keys from ambient state. It asks a
``CredentialProvider`` at the start of every run, so a key rotated by the
user takes effect on the very next analysis.

Implementations:
    EnvironmentCredentialProvider: reads GEMINI_API_KEY / API_KEY at call time
    InMemoryCredentialProvider: holds a key selected by the user at runtime
"""

import os
from typing import Callable, Optional, Protocol, Sequence, runtime_checkable

from .logging import get_logger

logger = get_logger(__name__, component="credentials")

DEFAULT_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


@runtime_checkable
class CredentialProvider(Protocol):
    """Source of the API credential used for one analysis request."""

    def has_credential(self) -> bool:
        ...

    def request_credential(self) -> None:
        """Start the out-of-band flow that lets the user supply a new credential."""
        ...

    def get_credential(self) -> Optional[str]:
        ...


class EnvironmentCredentialProvider:
    """Reads the credential from environment variables each time it is asked."""

    def __init__(self, env_vars: Sequence[str] = DEFAULT_ENV_VARS):
        self.env_vars = tuple(env_vars)

    def get_credential(self) -> Optional[str]:
        for name in self.env_vars:
            value = (os.getenv(name) or "").strip()
            if value:
                return value
        return None

    def has_credential(self) -> bool:
        return self.get_credential() is not None

    def request_credential(self) -> None:
        # Nothing to prompt: the operator has to export a new key.
        logger.warning(
            "Credential requested but environment provider cannot prompt",
            extra={"env_vars": list(self.env_vars)},
        )


class InMemoryCredentialProvider:
    """
    Holds a credential chosen by the user during the session.

    Args:
        credential: Optional initial credential
        fallback: Optional provider consulted when no key has been set
        on_request: Callback that opens the key-selection flow in the UI
    """

    def __init__(
        self,
        credential: Optional[str] = None,
        fallback: Optional[CredentialProvider] = None,
        on_request: Optional[Callable[[], None]] = None,
    ):
        self._credential = (credential or "").strip() or None
        self.fallback = fallback
        self.on_request = on_request
        self.request_count = 0

    def set_credential(self, credential: Optional[str]) -> None:
        self._credential = (credential or "").strip() or None
        logger.info("Credential updated", extra={"configured": self._credential is not None})

    def clear(self) -> None:
        self._credential = None

    def get_credential(self) -> Optional[str]:
        if self._credential:
            return self._credential
        if self.fallback is not None:
            return self.fallback.get_credential()
        return None

    def has_credential(self) -> bool:
        return self.get_credential() is not None

    def request_credential(self) -> None:
        self.request_count += 1
        if self.on_request is not None:
            self.on_request()
