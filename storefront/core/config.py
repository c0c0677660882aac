from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Storefront API"

    # "development" exposes exception detail in 500 responses
    ENVIRONMENT: str = "production"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Session
    SESSION_HEADER: str = "x-session-id"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Catalog
    DEFAULT_PAGE_LIMIT: int = 10
    CATALOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


settings = Settings()
