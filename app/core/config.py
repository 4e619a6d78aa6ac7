# app/core/config.py

from pydantic_settings import BaseSettings
from pathlib import Path
from functools import lru_cache


class Settings(BaseSettings):
    # --- PROJECT ---
    PROJECT_NAME: str = "Shipping Rate Calculator API"
    LOG_LEVEL: str = "INFO"

    # --- POSTGRES (optional, SQLite is used otherwise) ---
    POSTGRES_USER: str | None = None
    POSTGRES_PASS: str | None = None
    POSTGRES_PORT: int | None = None
    POSTGRES_NAME: str | None = None
    POSTGRES_HOST: str | None = None

    # --- DATABASE ---
    DATABASE_URL: str = "sqlite:///./shipping.db"

    # --- PATHS ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    RATES_FILE: Path = DATA_DIR / "rates.json"
    PINCODES_DIR: Path = DATA_DIR / "pincodes"

    # --- PINCODE SYNC (company backend) ---
    PINCODE_API_URL: str | None = None
    PINCODE_API_TOKEN: str | None = None
    PINCODE_PAGE_SIZE: int = 500

    # --- QUOTES ---
    QUOTE_VALIDITY_DAYS: int = 30

    class Config:
        env_file = ".env"
        case_sensitive = True

    def model_post_init(self, __context):
        postgres = (self.POSTGRES_USER, self.POSTGRES_PASS, self.POSTGRES_HOST,
                    self.POSTGRES_PORT, self.POSTGRES_NAME)
        if all(postgres):
            self.DATABASE_URL = (
                f"postgresql://{self.POSTGRES_USER}:"
                f"{self.POSTGRES_PASS}@"
                f"{self.POSTGRES_HOST}:"
                f"{self.POSTGRES_PORT}/"
                f"{self.POSTGRES_NAME}"
            )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
