from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "DL Solutions API"
    version: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    APP_DOMAIN: str = "dlsolutions.cm"
    APP_DATABASE_DSN: str = "sqlite:////tmp/dlsolutions.db"

    # Identity provider (Supabase-style HS256 access tokens)
    AUTH_JWT_SECRET: str = "change-me"
    AUTH_JWT_AUDIENCE: str = "authenticated"

    # Card processor
    stripe_api_key: str = ""
    stripe_api_version: str = "2023-10-16"

    # Hosted completion API
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    AI_MODEL: str = "gpt-4-turbo-preview"
    AI_CHAT_MODEL: str = "gpt-4"
    AI_CACHE_SIZE: int = 100

    # Outbound mail
    SMTP_HOST: str = ""
    SMTP_PORT: int = 465
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    SMTP_FROM_EMAIL: str = "contact@dlsolutions.cm"
    SMTP_FROM_NAME: str = "DL Solutions"
    CONTACT_INBOX_EMAIL: str = "contact@dlsolutions.cm"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:19006"

    # Rate limiting
    RATE_LIMIT_CONTACT_PER_MINUTE: int = 5

    @property
    def smtp_enabled(self) -> bool:
        return bool(self.SMTP_HOST)


settings = Settings()
