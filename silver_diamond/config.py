"""
Configuration management for the Silver Diamond client.
Loads environment variables (and an optional .env file) into class attributes.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import BASE_URL as DEFAULT_BASE_URL

# Load environment variables from .env file
load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


def _optional_bool(value: Optional[str]) -> Optional[bool]:
    if value is None or not value.strip():
        return None
    return value.strip().lower() == "true"


class Config:
    """
    Centralized configuration for the Silver Diamond client.
    """

    # API Keys (from environment)
    API_KEY = os.getenv("SILVER_DIAMOND_API_KEY")

    # Remote service
    BASE_URL = os.getenv("SILVER_DIAMOND_BASE_URL", DEFAULT_BASE_URL)
    # None leaves the timeout to requests itself
    REQUEST_TIMEOUT = _optional_float(os.getenv("SILVER_DIAMOND_TIMEOUT"))
    # None keeps the session's own verify setting
    VERIFY_SSL = _optional_bool(os.getenv("SILVER_DIAMOND_VERIFY_SSL"))

    # Logging configuration
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def validate(cls) -> bool:
        """
        Validate that required configuration is present.

        Returns:
            bool: True if valid, False otherwise
        """
        required = [
            ("SILVER_DIAMOND_API_KEY", cls.API_KEY),
        ]

        missing = [name for name, value in required if not value or not value.strip()]

        if missing:
            print(f"❌ Missing required configuration: {', '.join(missing)}")
            return False

        return True

    @classmethod
    def display(cls):
        """Display current configuration (safe - no secrets)."""
        print("⚙️  Silver Diamond Configuration:")
        print(f"   Base URL: {cls.BASE_URL}")
        print(f"   Timeout: {cls.REQUEST_TIMEOUT if cls.REQUEST_TIMEOUT is not None else 'library default'}")
        print(f"   Verify SSL: {cls.VERIFY_SSL if cls.VERIFY_SSL is not None else 'session default'}")
        print(f"   Log Level: {cls.LOG_LEVEL}")
        print(f"   API Key Set: {'✅' if cls.API_KEY else '❌'}")


def configure_logging(level: Optional[str] = None):
    """Configure logging with consistent format."""
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format=Config.LOG_FORMAT
    )


# Global config instance
config = Config()
