from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod|test
    TZ: str = Field(default="UTC")

    # Security
    JWT_SECRET: str = Field(default="change-me")
    JWT_ALG: str = Field(default="HS256")
    JWT_EXPIRES_MIN: int = Field(default=60 * 12)

    # DB
    DATABASE_URL: str = Field(default="postgresql+psycopg://app:app@db:5432/research")

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:5173,http://localhost")

    # Business defaults
    DEADLINE_APPROACHING_DAYS: int = Field(default=7)
    RECENT_CHANGES_LIMIT: int = Field(default=10)

    # Seed (first start)
    SEED_DEFAULTS: bool = Field(default=True)
    DEFAULT_USER_USERNAME: str = Field(default="default_user")
    DEFAULT_USER_PASSWORD: str = Field(default="default123")
    DEFAULT_USER_EMAIL: str = Field(default="default@example.com")


settings = Settings()
