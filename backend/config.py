from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Tatami Estimate API"
    LOG_LEVEL: str = "INFO"

    # Single-currency engine: this is only a display label
    CURRENCY: str = "JPY"

    # Grade used when a request leaves it out
    DEFAULT_GRADE: str = "standard"

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
