"""
Configuration module for the Todos web app.
Handles environment variables and application settings.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_TODOS_URL = "https://jsonplaceholder.typicode.com/todos"


@dataclass
class AppConfig:
    """Application-specific configuration"""
    title: str = "Create Next App"
    description: str = "Generated by create next app"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    debug_mode: bool = os.getenv("DEBUG_MODE", "false").lower() == "true"
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))
    # Remote resource the resolver and the provider both read from
    todos_url: str = os.getenv("TODOS_URL", DEFAULT_TODOS_URL)
    # None disables the client timeout entirely (a started fetch always settles on its own)
    fetch_timeout: Optional[float] = float(os.getenv("FETCH_TIMEOUT", "")) if os.getenv("FETCH_TIMEOUT") else None
    # Pass the server-resolved payload into the provider so the live session skips its fetch
    forward_ssr_data: bool = os.getenv("FORWARD_SSR_DATA", "true").lower() == "true"

    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_mode else self.log_level.upper()


app_config = AppConfig()
