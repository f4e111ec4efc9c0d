"""
Configuration settings for the Breach Engine
"""

from typing import List, Optional
from pydantic_settings import BaseSettings

from breach_db.sources.federal.hhs.config import DEFAULT_USER_AGENT


class Settings(BaseSettings):
    """Application settings"""

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Result cache
    CACHE_TTL: int = 3600  # 1 hour

    # Fetching
    HTTP_TIMEOUT: int = 30
    NAVIGATION_TIMEOUT: int = 60
    BROWSER_HEADLESS: bool = True
    USER_AGENT: str = DEFAULT_USER_AGENT

    # Sources
    HHS_URL: str = "https://ocrportal.hhs.gov/ocr/breach/breach_report.jsf"
    MAINE_URL: str = "https://www.maine.gov/agviewer/content/ag/985235c7-cb95-4be2-8792-a1252b4f8318/list.html"
    MAINE_MAX_REPORTS: int = 10
    MAINE_MIN_LINK_LENGTH: int = 100
    TEXAS_URL: str = "https://oag.my.site.com/datasecuritybreachreport/apex/DataSecurityReportsPage"
    TEXAS_MAX_RECORDS: int = 15
    TEXAS_RENDER_DELAY: float = 5.0
    TEXAS_PAGINATION_DELAY: float = 3.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
