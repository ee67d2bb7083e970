import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    seed_file: str | None = None
    key_field: str = "id"
    unique_field: str = "id"


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("MODEL_INTERCHANGE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        seed_file=os.getenv("MODEL_INTERCHANGE_SEED_FILE", "").strip() or None,
        key_field=os.getenv("MODEL_INTERCHANGE_KEY_FIELD", "").strip() or "id",
        unique_field=os.getenv("MODEL_INTERCHANGE_UNIQUE_FIELD", "").strip() or "id",
    )
