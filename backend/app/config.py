from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Narrative Engine API"

    # Logging
    log_level: str = "INFO"

    # Storefront origin allowed by CORS (the studio calls the API from here)
    frontend_url: str = "http://localhost:3000"

    model_config = {"env_file": ".env"}


settings = Settings()
