from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "realworld-api"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]
    SECURITY_HEADERS: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
