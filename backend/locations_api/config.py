"""Configuration settings for the user locations service"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "User Locations API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CLIENT_ORIGIN: str = "*"

    # Database Settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./locations.db"
    DATABASE_ECHO: bool = False
    STORE_TIMEOUT_SECONDS: float = 5.0

    # Auth Settings
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRY_MINUTES: int = 60 * 24 * 7  # 7 days
    JWT_REFRESH_EXPIRY_DAYS: int = 30
    BCRYPT_ROUNDS: int = 12

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT.lower() == "test"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
