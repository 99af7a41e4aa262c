"""Configuration settings for genius_lyrics."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional, Union

from dotenv import dotenv_values, find_dotenv

from .exceptions import ConfigError
from .utils.logging import get_logger

logger = get_logger(__name__)

# Endpoints (can be overridden via environment variables)
DEFAULT_SEARCH_URL = "https://api.genius.com/search"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/143.0.0.0 Safari/537.36"
)

# Credential names looked up in the environment / .env file
CLIENT_ID_VAR = "GENIUS_CLIENT_ID"
CLIENT_SECRET_VAR = "GENIUS_CLIENT_SECRET"
ACCESS_TOKEN_VAR = "GENIUS_ACCESS_TOKEN"
CREDENTIAL_VARS = (CLIENT_ID_VAR, CLIENT_SECRET_VAR, ACCESS_TOKEN_VAR)

EnvFile = Union[str, Path, None]


@dataclass(frozen=True)
class GeniusCredentials:
    """API credentials, read once at startup and passed to the client."""

    client_id: str = ""
    client_secret: str = ""
    access_token: str = ""
    missing: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_complete(self) -> bool:
        return not self.missing


def read_from_env_file(var_name: str, env_file: EnvFile = None) -> Optional[str]:
    """
    Look up a value in the process environment, then in a .env file.

    Returns None when the name is absent from both; a name that is present
    with an empty value returns "".
    """
    value = os.getenv(var_name)
    if value is not None:
        return value

    path = str(env_file) if env_file is not None else find_dotenv(usecwd=True)
    if not path or not Path(path).is_file():
        return None
    return dotenv_values(path).get(var_name)


def load_credentials(env_file: EnvFile = None) -> GeniusCredentials:
    """Read the three Genius credentials. Absent values become ""."""
    values = {}
    missing = set()
    for var_name in CREDENTIAL_VARS:
        value = read_from_env_file(var_name, env_file)
        if value is None:
            logger.warning(f"could not read {var_name} from .env file")
            missing.add(var_name)
            value = ""
        values[var_name] = value

    return GeniusCredentials(
        client_id=values[CLIENT_ID_VAR],
        client_secret=values[CLIENT_SECRET_VAR],
        access_token=values[ACCESS_TOKEN_VAR],
        missing=frozenset(missing),
    )


def get_timeout() -> float:
    """Get network timeout in seconds from environment or default."""
    raw = os.getenv("GENIUS_LYRICS_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"Invalid GENIUS_LYRICS_TIMEOUT: {raw!r}")
    if timeout <= 0:
        raise ConfigError("GENIUS_LYRICS_TIMEOUT must be positive")
    return timeout


def get_search_url() -> str:
    """Get the search endpoint from environment or default."""
    return os.getenv("GENIUS_LYRICS_SEARCH_URL") or DEFAULT_SEARCH_URL


def get_user_agent() -> str:
    return os.getenv("GENIUS_LYRICS_USER_AGENT") or DEFAULT_USER_AGENT
