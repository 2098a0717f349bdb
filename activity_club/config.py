from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    api_base: str = Field(default="http://localhost:5000")
    reset_capacity: int = Field(default=5, ge=0)
    http_timeout: float | None = Field(default=None, gt=0)


def _optional_float(raw: str | None) -> float | None:
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_base=os.getenv("API_BASE", Settings.model_fields["api_base"].default),
        reset_capacity=int(os.getenv("RESET_CAPACITY", "5")),
        http_timeout=_optional_float(os.getenv("HTTP_TIMEOUT")),
    )
