"""
EdgeWorkers Configuration

Client settings and EdgeGrid credentials.
"""

import configparser
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.exceptions import ConfigurationError

DEFAULT_EDGERC = "~/.edgerc"
DEFAULT_SECTION = "default"
MAX_BODY_SIZE = 131072

logger = structlog.get_logger()

_REQUIRED_OPTIONS = ("host", "client_token", "client_secret", "access_token")


class Settings(BaseSettings):
    """Client Settings"""

    # Transport
    timeout: float = 30.0
    max_retries: int = 0
    user_agent: str = "edgeworkers-client/0.1.0"

    # Credentials
    edgerc: str = DEFAULT_EDGERC
    section: str = DEFAULT_SECTION
    use_env: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="EDGEWORKERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


class _EdgeGridEnv(BaseSettings):
    """AKAMAI_* environment variables"""

    host: str
    client_token: str
    client_secret: str
    access_token: str
    account_key: str = ""
    max_body: int = 0

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


class EdgeGridConfig(BaseModel):
    """EdgeGrid credentials used to sign requests"""

    host: str
    client_token: str
    client_secret: str
    access_token: str
    account_key: str = ""
    headers_to_sign: list[str] = Field(default_factory=list)
    max_body: int = MAX_BODY_SIZE

    @classmethod
    def from_edgerc(cls, path: str = DEFAULT_EDGERC, section: str = DEFAULT_SECTION) -> "EdgeGridConfig":
        """Load credentials from a section of an .edgerc file"""
        file = Path(path).expanduser()
        parser = configparser.ConfigParser()
        try:
            with file.open(encoding="utf-8") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            raise ConfigurationError(f"could not load config file: {e}") from e

        if not parser.has_section(section):
            raise ConfigurationError(f"section {section!r} does not exist in {file}")

        options = parser[section]
        for option in _REQUIRED_OPTIONS:
            if option not in options:
                raise ConfigurationError(f"required option {option!r} is missing from edgerc")

        headers = [h.strip() for h in options.get("headers_to_sign", "").split(",") if h.strip()]
        try:
            max_body = options.getint("max_body", fallback=0)
        except ValueError as e:
            raise ConfigurationError(f"invalid max_body: {e}") from e

        return cls(
            host=options["host"],
            client_token=options["client_token"],
            client_secret=options["client_secret"],
            access_token=options["access_token"],
            account_key=options.get("account_key", ""),
            headers_to_sign=headers,
            max_body=max_body if max_body > 0 else MAX_BODY_SIZE,
        )

    @classmethod
    def from_env(cls, section: str = DEFAULT_SECTION) -> "EdgeGridConfig":
        """
        Load credentials from environment variables

        The default section reads AKAMAI_HOST, AKAMAI_CLIENT_TOKEN, ...;
        any other section reads AKAMAI_{SECTION}_HOST and so on.
        """
        prefix = "AKAMAI_"
        if section.lower() != DEFAULT_SECTION:
            prefix = f"AKAMAI_{section.upper()}_"

        try:
            env = _EdgeGridEnv(_env_prefix=prefix)  # type: ignore[call-arg]
        except ValidationError as e:
            missing = ", ".join(f"{prefix}{str(err['loc'][0]).upper()}" for err in e.errors())
            raise ConfigurationError(f"required options are missing from env: {missing}") from e

        return cls(
            host=env.host,
            client_token=env.client_token,
            client_secret=env.client_secret,
            access_token=env.access_token,
            account_key=env.account_key,
            max_body=env.max_body if env.max_body > 0 else MAX_BODY_SIZE,
        )

    @classmethod
    def load(
        cls,
        path: str = DEFAULT_EDGERC,
        section: str = DEFAULT_SECTION,
        use_env: bool = False,
    ) -> "EdgeGridConfig":
        """Environment first when enabled, then the .edgerc file"""
        if use_env:
            try:
                return cls.from_env(section)
            except ConfigurationError as e:
                logger.debug("edgegrid_env_config_unavailable", section=section, error=str(e))
        return cls.from_edgerc(path, section)
