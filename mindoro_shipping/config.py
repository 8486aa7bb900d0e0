from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Mindoro Shipping Calculator"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: str = "*"  # comma separated

    # Pricing constants (divisor, bag tiers, rate table) are code, see rates.py.

    class Config:
        env_file = ".env"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


settings = Settings()
