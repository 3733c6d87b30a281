"""Configuration management for the CiNii Books client.

Loads configuration from environment variables and provides defaults.
Importing this module loads a .env file into the environment. A client
built without a Config falls back to get_config(), which reads the
environment once per process.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load .env file if present
load_dotenv()

APPID_ENV = "CINII_APPID"
DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = "ciniibooks/0.1 (+https://ci.nii.ac.jp/books/)"


@dataclass(frozen=True)
class Config:
    """Client configuration."""

    # API key sent as the appid query parameter
    appid: Optional[str] = None

    # HTTP
    timeout: int = DEFAULT_TIMEOUT  # seconds
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            appid=os.environ.get(APPID_ENV) or None,
            timeout=int(os.environ.get("CINII_TIMEOUT", str(DEFAULT_TIMEOUT))),
            user_agent=os.environ.get("CINII_USER_AGENT", DEFAULT_USER_AGENT),
        )

    def require_appid(self) -> str:
        """Return the appid or raise ConfigurationError if it is unset."""
        if not self.appid:
            raise ConfigurationError(
                f"Set your CiNii appid in the {APPID_ENV} environment variable"
            )
        return self.appid

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not self.appid:
            errors.append(f"{APPID_ENV} is not set")
        if self.timeout <= 0:
            errors.append(f"Timeout must be positive, got {self.timeout}")

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
