"""Game configuration using Pydantic settings."""

import hashlib
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Game settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SKELETON_KEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dealing
    hand_size: int = Field(default=5, ge=1, description="Words dealt to each player")
    min_players: int = Field(default=2, ge=2, description="Minimum players per game")
    max_players: int = Field(default=8, ge=2, description="Maximum players per game")

    # Skeleton keys
    starting_keys: int = Field(default=2, ge=1, description="Keys each player starts with")
    winning_keys: int = Field(default=3, ge=2, description="Keys needed to win")

    # Loop limits
    max_turns: int = Field(default=1000, ge=1, description="Turns played before a draw is declared")

    # Hash challenge
    challenge_algorithm: str = Field(default="sha256", description="hashlib algorithm for challenges")
    digest_display_length: int = Field(default=12, ge=4, description="Digest characters shown in narration")

    # Randomness and logging
    rng_seed: Optional[int] = Field(default=None, description="Seed for the game's random source")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("challenge_algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        name = value.lower()
        # shake digests need an explicit length
        if name not in hashlib.algorithms_available or name.startswith("shake_"):
            msg = f"Unknown hash algorithm: {value}"
            raise ValueError(msg)
        return name

    @model_validator(mode="after")
    def _check_bounds(self) -> "Settings":
        if self.starting_keys >= self.winning_keys:
            msg = "starting_keys must be below winning_keys"
            raise ValueError(msg)
        if self.min_players > self.max_players:
            msg = "min_players cannot exceed max_players"
            raise ValueError(msg)
        return self


# Global settings instance
settings = Settings()
