from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    locale: str = "de_DE"
    currency: str = "EUR"
    due_month: int = 12
    due_day: int = 23
    log_level: str = "WARNING"

    model_config = {"env_prefix": "APP_", "env_file": ".env"}


settings = Settings()
