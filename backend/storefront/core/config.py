"""
Centralized application configuration
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, read from the environment and `.env`"""

    # Application
    APP_NAME: str = "Storefront"
    APP_VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Price display defaults (BCP 47 locale tag and ISO 4217 currency)
    PRICE_DEFAULT_LOCALE: str = "en-US"
    PRICE_DEFAULT_CURRENCY: str = "USD"

    # Validation rules
    PASSWORD_MIN_LENGTH: int = 8
    NAME_MIN_LENGTH: int = 2
    PRODUCT_TITLE_MIN_LENGTH: int = 3
    PRODUCT_TITLE_MAX_LENGTH: int = 20

    # Password hashing (bcrypt cost factor)
    PASSWORD_HASH_ROUNDS: int = 12

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
