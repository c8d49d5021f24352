from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./jobboard.db"
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://jobs.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:3000,http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Client side: where the API lives and how long to wait for it
    api_base_url: str = "http://localhost:8000/api"
    api_timeout_seconds: float = 10.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
