from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Country Admin"
    DEBUG: bool = False
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./countries.db"
    DATABASE_ECHO: bool = False

    # List page
    PAGE_SIZE: int = 20

    # Base URL the list page fetches from; empty means the app itself
    API_BASE_URL: str = ""
    API_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
