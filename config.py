"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse POKER_SEED; unset or empty means an unseeded session."""
    raw = os.getenv("POKER_SEED", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class GameConfig:
    """Session rules: starting credits and the bet ladder."""

    starting_wallet: int = field(
        default_factory=lambda: int(os.getenv("POKER_STARTING_WALLET", "100"))
    )
    min_bet: int = 20
    bet_increment: int = 20
    max_bet: int = 100
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        if self.starting_wallet < 0:
            raise ValueError("starting_wallet cannot be negative")
        if self.min_bet <= 0 or self.bet_increment <= 0:
            raise ValueError("min_bet and bet_increment must be positive")
        if self.max_bet < self.min_bet:
            raise ValueError("max_bet must be at least min_bet")
        if (self.max_bet - self.min_bet) % self.bet_increment:
            raise ValueError("bet_increment must divide the range min_bet..max_bet")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
