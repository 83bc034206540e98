from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8098
    ENV: str = "production"  # production|development
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    # Database
    DATABASE_PATH: str = "neighbornotes.db"
    DATABASE_URL: str = ""
    SQL_ECHO: bool = False

    # Media uploads
    UPLOAD_DIR: str = "public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    SERVE_UPLOADS: bool = True
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_UPLOAD_TYPES: str = "image/jpeg,image/png,image/gif,image/webp"

    # Identity
    AUTH_MODE: str = "trusted"  # trusted|jwt
    AUTH_JWT_SECRET: str = ""
    AUTH_JWT_ALGORITHM: str = "HS256"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_development(self) -> bool:
        return self.ENV.strip().lower() == "development"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or f"sqlite+aiosqlite:///{self.DATABASE_PATH}"

    @property
    def allowed_upload_types(self) -> set[str]:
        return {t.strip() for t in self.ALLOWED_UPLOAD_TYPES.split(",") if t.strip()}

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
