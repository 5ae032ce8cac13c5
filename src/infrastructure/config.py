from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- Core App Settings ---
    APP_NAME: str = "TestMaker"
    FLASK_ENV: str = "production"
    SECRET_KEY: str
    DEBUG: bool = False

    # --- Infrastructure ---
    MONGO_URI: str  # database name is part of the URI, e.g. mongodb://host:27017/testmaker

    # --- Quiz API ---
    DEFAULT_AUTHOR_NAME: str = "Admin"  # stand-in for the authenticated caller
    DEFAULT_LIST_SIZE: int = 10
    SAMPLE_ANSWER_COUNT: int = 5
    CORS_ORIGINS: str = "*"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

# Load settings
settings = Settings()

# Production readiness checks
if settings.FLASK_ENV == "production":
    if not settings.SECRET_KEY or settings.SECRET_KEY == "change-this-to-a-very-secret-key-in-production":
        raise ValueError("CRITICAL: SECRET_KEY is not set for production.")
    if settings.DEBUG:
        raise ValueError("CRITICAL: DEBUG mode must be disabled in production.")
