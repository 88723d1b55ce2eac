from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGODB_URI: Optional[str] = None
    DATABASE_NAME: str = "lead_management"
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:8000"
    DOCS_ENABLED: bool = True

    # Demo account overrides used by scripts/seed_demo_users.py
    ADMIN_NAME: Optional[str] = None
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    TEAM_LEADER_NAME: Optional[str] = None
    TEAM_LEADER_EMAIL: Optional[str] = None
    TEAM_LEADER_PASSWORD: Optional[str] = None
    HR_NAME: Optional[str] = None
    HR_EMAIL: Optional[str] = None
    HR_PASSWORD: Optional[str] = None

    # .env.local is read last so local overrides win
    model_config = {"env_file": (".env", ".env.local"), "extra": "ignore"}


settings = Settings()
