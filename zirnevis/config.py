"""
zirnevis - Configuration Module
"""
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Compute paths at module level for consistency
_BASE_DIR = Path(__file__).parent.parent

# Data directory: use ZIRNEVIS_DATA_DIR env var, or default to ~/.zirnevis
_DATA_DIR = Path(os.environ.get("ZIRNEVIS_DATA_DIR", Path.home() / ".zirnevis"))


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "zirnevis"
    DEBUG: bool = False

    # Paths
    BASE_DIR: Path = _BASE_DIR
    DATA_DIR: Path = _DATA_DIR
    PROJECTS_DIR: Path = _DATA_DIR / "projects"

    # Playback
    SKIP_SECONDS: float = 5.0  # skip backward/forward step

    # Editor
    DEFAULT_CAPTION_DURATION: float = 3.0  # length of the next draft after an add

    # Proofreading
    READING_WORDS_PER_MINUTE: int = 200
    VALIDATION_ISSUE_PENALTY: int = 25  # score deduction per issue (score starts at 100)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
