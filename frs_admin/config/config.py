# frs_admin/config/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import pathlib
from dotenv import load_dotenv

# Explicitly load the .env file
env_path = pathlib.Path(__file__).parent / ".env"
load_dotenv(env_path)

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=pathlib.Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("FRS Admin - Backend")
    app_version: str = Field("1.0.0")
    debug: bool = Field(False)
    log_level: str = Field("INFO")
    log_file: str = Field("logs/frs-admin.log")  # empty string = console only
    host: str = Field("127.0.0.1")
    port: int = Field(8000)

    # Access tokens
    jwt_secret_key: str = Field(...)
    jwt_algorithm: str = Field("HS256")

    # Database
    db_host: str = Field("localhost")
    db_port: int = Field(5432)
    db_name: str = Field("frs")
    db_user: str = Field("postgres")
    db_password: str = Field("")
    db_pool_min_size: int = Field(5)
    db_pool_max_size: int = Field(20)

    # Admin UI origin allowed by CORS
    frontend_url: str = Field("")

settings = Settings()
