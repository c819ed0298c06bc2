"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the demo runs
without any setup.  Nothing here is persisted; the values only shape
logging and the parameters of the demo scenario.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Dating App")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a file that receives a copy of every log record.
    # Left empty, logs only go to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Minimum number of shared interests a candidate needs to be listed
    # as a match in the demo.  ``run.py --min-score`` overrides it.
    match_min_score: int = int(os.getenv("MATCH_MIN_SCORE", "1"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
