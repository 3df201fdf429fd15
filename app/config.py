from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Alliance of Magicians"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./magicians.db"

    # Security settings
    secret_key: str
    access_token_expire_minutes: int = 30
    nonce_lifetime: int = 86400  # seconds

    # Site settings
    site_url: str = "http://localhost:8000"
    options_file: str = "data/options.json"
    plugins_config_file: str = "data/plugins_config.json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
