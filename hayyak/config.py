import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

API_PREFIX = "/api"
ADVISOR_PATH = f"{API_PREFIX}/gemini"

ROUTES_COLLECTION = "routes"
SUGGESTIONS_COLLECTION = "suggestions"
MOOD_SUGGESTIONS_COLLECTION = "moodSuggestions"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str]
    gemini_model: str
    gcp_project_id: Optional[str]
    firestore_database: Optional[str]
    cors_origins: tuple[str, ...]
    api_url: str
    log_level: str


def load_settings() -> Settings:
    origins = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173").split(",")
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        gcp_project_id=os.getenv("GCP_PROJECT_ID") or None,
        firestore_database=os.getenv("FIRESTORE_DATABASE") or None,
        cors_origins=tuple(origin.strip() for origin in origins if origin.strip()),
        api_url=os.getenv("HAYYAK_API_URL", "http://localhost:8000").rstrip("/"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
