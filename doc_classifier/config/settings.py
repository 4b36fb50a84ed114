from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_keywords: int = 10
    batch_max_workers: int = 4

    pdf_engine: str = "pdfplumber"

    max_files: int = 10
    max_file_size_mb: int = 10
