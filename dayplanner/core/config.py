from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./dayplanner.db")
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Project settings
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Day Planner")
    API_V1_STR: str = "/api/v1"

    # Frontend origins (web app dev server and vite)
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Insert demo users and tasks when the tables are created
    SEED_DEMO_DATA: bool = False

    class Config:
        env_file = ".env"
        # Allows variables in .env that aren't defined here to simply be ignored.
        extra = "ignore"

settings = Settings()
