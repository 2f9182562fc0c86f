from dataclasses import dataclass
from functools import lru_cache
import os


def _to_bool(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: str | None, *, default: int, minimum: int) -> int:
    if value is None:
        return default
    parsed = int(value)
    return max(minimum, parsed)


@dataclass(frozen=True)
class Settings:
    data_path: str
    cache_dataset: bool
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    return Settings(
        data_path=os.getenv("COUPLETS_DATA_PATH", "data/couplets.json"),
        cache_dataset=_to_bool(os.getenv("COUPLETS_CACHE_DATASET"), default=False),
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=_to_int(os.getenv("PORT"), default=3000, minimum=1),
        log_level=os.getenv("API_LOG_LEVEL", "INFO"),
    )
