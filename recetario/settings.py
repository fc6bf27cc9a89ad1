from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Conversion policy
    # When no density matches an ingredient, use the fallback (water) or fail.
    allow_default_density: bool = True
    fallback_density_g_per_ml: float = 1.0

    # Display
    quantity_display: Literal["decimal", "cook"] = "decimal"

    # Rate limiting (slowapi)
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
