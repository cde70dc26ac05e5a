from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    DATABASE_URL: str
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Supabase Auth
    SUPABASE_URL: Optional[str] = None
    SUPABASE_JWT_SECRET: Optional[str] = None

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Billing defaults
    DEFAULT_ELEC_RATE: float = 11
    OVERDUE_BILLS_LIMIT: int = 10

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
