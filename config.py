"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field
from decimal import Decimal

from blackjack.rules import RuleSet


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or empty means an unseeded shuffle."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class SecurityConfig:
    """Security configuration."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    )


@dataclass(frozen=True)
class GameConfig:
    """Default table configuration."""

    dealer_hits_soft_17: bool = field(
        default_factory=lambda: _env_flag("BLACKJACK_DEALER_HITS_SOFT_17", "true")
    )
    blackjack_payout: Decimal = Decimal("1.5")
    seed: int | None = field(default_factory=_parse_seed)

    def to_rules(self) -> RuleSet:
        """Build the engine rule set for these settings."""
        return RuleSet(
            dealer_hits_soft_17=self.dealer_hits_soft_17,
            blackjack_payout=self.blackjack_payout,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    session_ttl: int = 3600  # Session timeout in seconds

    game: GameConfig = field(default_factory=GameConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)


# Global configuration instance
config = AppConfig()
