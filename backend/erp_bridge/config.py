from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./erp_system.db"
    database_echo: bool = False  # Log every SQL statement (debugging only)

    # Partner API (outbound EDI 810 invoices)
    partner_api_url: str = "https://api.zenbridge.io/v1/edi/810"
    partner_api_token: Optional[str] = None  # Sent as "Authorization: Bearer <token>"

    # Logging
    log_level: str = "INFO"

    # CORS Configuration
    cors_origins: str = "http://localhost:3000,http://localhost:3001"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env file


settings = Settings()
