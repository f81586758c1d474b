from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MARKOV_TRAFFIC_")

    # History length used by chains built from settings.
    order: int = Field(default=1, ge=1)
    # Seed for the weighted sampler; unset means a fresh random stream.
    seed: Optional[int] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


settings = Settings()
