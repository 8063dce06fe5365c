from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    output_dir: Path = Path(".")
    log_level: str = "INFO"

    # Cross-check every label against the count of self-coincident images
    verify_stabilizer: bool = True
    # Audit connectivity and canonical form of every generated shape
    verify_generations: bool = False

    model_config = SettingsConfigDict(
        env_prefix="POLYHEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
