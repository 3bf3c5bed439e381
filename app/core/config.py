from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "employee-records-browser"

    DATA_FILE_PATH: str = "data.json"

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    DEFAULT_PAGE_LIMIT: int = 50
    MAX_PAGE_LIMIT: int = 1000

    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3001

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
