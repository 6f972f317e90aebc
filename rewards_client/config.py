"""
Environment configuration for the rewards grant service.

The grant base URL is selected by environment and can be overridden.
Values are read once and passed around as an immutable EnvironmentConfig.

Environment variables:
    REWARDS_ENVIRONMENT   - production | staging | development (default: production)
    REWARDS_GRANT_URL     - override for the grant service base URL
    REWARDS_HTTP_TIMEOUT  - request timeout in seconds (default: 30)
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_TIMEOUT = 30.0


class Environment(str, Enum):
    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"


GRANT_URLS = {
    Environment.PRODUCTION: "https://grant.rewards.brave.com",
    Environment.STAGING: "https://grant.rewards.bravesoftware.com",
    Environment.DEVELOPMENT: "https://grant.rewards.brave.software",
}


def parse_environment(name: str) -> Environment:
    try:
        return Environment(name.strip().lower())
    except ValueError:
        valid = ", ".join(e.value for e in Environment)
        raise ValueError(f"Unknown environment: {name!r} (expected one of: {valid})")


def parse_timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {value!r}")
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive, got {timeout}")
    return timeout


@dataclass(frozen=True)
class EnvironmentConfig:
    environment: Environment
    rewards_grant_url: str
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def for_environment(
        cls,
        environment: Environment | str = Environment.PRODUCTION,
        grant_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "EnvironmentConfig":
        if not isinstance(environment, Environment):
            environment = parse_environment(environment)
        return cls(
            environment=environment,
            rewards_grant_url=grant_url or GRANT_URLS[environment],
            timeout=parse_timeout(timeout),
        )

    @classmethod
    def from_env(cls) -> "EnvironmentConfig":
        """Build config from REWARDS_* environment variables."""
        return cls.for_environment(
            os.environ.get("REWARDS_ENVIRONMENT", Environment.PRODUCTION.value),
            grant_url=os.environ.get("REWARDS_GRANT_URL"),
            timeout=os.environ.get("REWARDS_HTTP_TIMEOUT", DEFAULT_TIMEOUT),
        )
