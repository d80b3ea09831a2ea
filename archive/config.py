# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def _flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

class Config:
    # Storage
    POSTS_DIR: str = os.getenv("POSTS_DIR", "posts")
    POSTS_EXTENSION: str = os.getenv("POSTS_EXTENSION", ".md")

    # Static assets (landing page, archive and editor pages)
    PUBLIC_DIR: str = os.getenv("PUBLIC_DIR", "public")

    # Development server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Debug mode
    DEBUG: bool = os.getenv("FLASK_ENV") == "development" or _flag("FLASK_DEBUG")
    DEBUG_LOGGING: bool = os.getenv("DEBUG_LOGGING") is not None

    # CORS
    CORS_ORIGINS: List[str] = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

    # Discord
    DISCORD_WEBHOOK_URL: Optional[str] = os.getenv("DISCORD_WEBHOOK_URL")
    DISCORD_NOTIFICATIONS_ENABLED: bool = _flag("DISCORD_NOTIFICATIONS_ENABLED", "true")

    @classmethod
    def is_discord_enabled(cls) -> bool:
        """Check if Discord notifications are enabled."""
        return cls.DISCORD_NOTIFICATIONS_ENABLED and bool(cls.DISCORD_WEBHOOK_URL)
