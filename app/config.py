from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database Configuration
    DATABASE_URL: str = "sqlite:///./scrapcart.db"

    # Security Configuration
    SECRET_KEY: str = "change-this-secret-key-before-deploying-scrapcart"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    MIN_PASSWORD_LENGTH: int = 8

    # Order validation bounds
    MIN_WEIGHT_KG: float = 1
    MAX_WEIGHT_KG: float = 50
    MIN_LOCATION_LENGTH: int = 5
    MAX_LOCATION_LENGTH: int = 200

    # AI gateway (OpenAI-compatible chat completions)
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_GATEWAY_API_KEY: str = ""
    AI_MODEL: str = "google/gemini-2.5-flash"
    AI_REQUEST_TIMEOUT: int = 30  # seconds

    # Image upload settings
    MAX_IMAGE_SIZE: int = 5242880  # 5MB in bytes
    ALLOWED_IMAGE_TYPES: str = "image/jpeg,image/png,image/webp,image/gif"

    # CORS
    CORS_ORIGINS: str = "*"

    # Application Settings
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    model_config = {
        "extra": "allow",
        "env_file": ".env"
    }

settings = Settings()
