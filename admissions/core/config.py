"""
Application configuration

Environment-driven settings managed by pydantic-settings
"""
from functools import lru_cache
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
import json

# Repository root
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings"""
    
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )
    
    # Application
    app_name: str = "Admissions-API"
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    
    # Database
    database_url: str = f"sqlite+aiosqlite:///{BASE_DIR / 'data' / 'admissions.db'}"
    
    # CORS
    cors_origins: List[str] = ["*"]
    
    # Committees with special visibility rules
    election_committee_id: int = 13
    main_board_id: int = 1
    
    # Application list
    applications_page_size: int = 4
    
    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v
    
    @field_validator("database_url", mode="before")
    @classmethod
    def fix_database_path(cls, v):
        if isinstance(v, str) and "./data/" in v:
            return v.replace("./data/", str(BASE_DIR / "data") + "/")
        return v
    
    @field_validator("applications_page_size")
    @classmethod
    def check_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("applications_page_size must be positive")
        return v
    
    @model_validator(mode="after")
    def check_special_committees(self) -> "Settings":
        if self.election_committee_id == self.main_board_id:
            raise ValueError("election_committee_id and main_board_id must differ")
        return self
    

@lru_cache
def get_settings() -> Settings:
    """Settings singleton"""
    return Settings()


# Global settings instance
settings = get_settings()
