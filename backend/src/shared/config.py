from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DOCUMENT_ID_STRATEGY: Literal["uuid", "sequence"] = "uuid"
    DOCUMENT_ID_PREFIX: str = "doc-"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
