from pydantic import AnyUrl
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    # Store backend selection: "dynamodb", "redis" or "memory"
    STORE_BACKEND: Literal["dynamodb", "redis", "memory"] = "dynamodb"
    AWS_REGION: str | None = None
    DYNAMODB_ENDPOINT_URL: str | None = None  # e.g. http://localhost:8000 for DynamoDB Local
    REDIS_URL: AnyUrl | None = None
    REDIS_KEY_PREFIX: str = "recorder:"
    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"
    SERVICE_PORT: int = 8080

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
