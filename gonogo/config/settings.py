from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    # Unset: snapshots are only returned as downloads.
    snapshot_dir: Optional[Path] = None

    class Config:
        env_prefix = "GONOGO_"
        env_file = ".env"
