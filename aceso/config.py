# backend configuration
# loads env vars for storage, openai, gemini, and the assistant

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings(BaseSettings):
    # entry store backend: "memory" or "mongodb"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory")

    # mongodb
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "aceso_db")

    # openai (for emotion analysis)
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-5")

    # gemini (for the wellness assistant)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    ASSISTANT_HISTORY_TURNS: int = 5

    # journal validation
    JOURNAL_MAX_LENGTH: int = 10000

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
