"""Configuration management."""

import os
from dataclasses import dataclass

from .sources.transport import DEFAULT_TIMEOUT
from .sources.upbit import BASE_URL


@dataclass
class SystemConfig:
    """System configuration from environment variables."""

    access_key: str
    secret_key: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "SystemConfig":
        """Load configuration from environment variables.

        Reads UPBIT_ACCESS_KEY, UPBIT_SECRET_KEY, and optionally UPBIT_BASE_URL
        and UPBIT_TIMEOUT (seconds).

        Raises:
            ValueError: If UPBIT_TIMEOUT is not a number
        """
        timeout_str = os.getenv("UPBIT_TIMEOUT", "").strip()
        try:
            timeout = float(timeout_str) if timeout_str else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"UPBIT_TIMEOUT must be a number of seconds, got {timeout_str!r}") from e

        return cls(
            access_key=os.getenv("UPBIT_ACCESS_KEY", "").strip(),
            secret_key=os.getenv("UPBIT_SECRET_KEY", "").strip(),
            base_url=os.getenv("UPBIT_BASE_URL", "").strip() or BASE_URL,
            timeout=timeout,
        )

    def validate(self) -> None:
        """Validate configuration."""
        if not self.access_key or not self.secret_key:
            raise ValueError("UPBIT_ACCESS_KEY and UPBIT_SECRET_KEY must be set")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"UPBIT_BASE_URL must be an http(s) URL, got {self.base_url!r}")
        if self.timeout <= 0:
            raise ValueError("UPBIT_TIMEOUT must be positive")

    def masked_access_key(self) -> str:
        if len(self.access_key) <= 4:
            return "****"
        return f"...{self.access_key[-4:]}"
