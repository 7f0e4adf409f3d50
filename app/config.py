# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Submission backend simulation
_SUBMIT_LATENCY_MS = int(os.getenv("SUBMIT_LATENCY_MS", "1500"))
_SIMULATE_SUBMIT_FAILURE = os.getenv("SIMULATE_SUBMIT_FAILURE", "false").lower() in ("true", "1", "yes")

# Wizard lifecycle
_SUCCESS_DISMISS_DELAY_MS = int(os.getenv("SUCCESS_DISMISS_DELAY_MS", "2000"))

# Language ("en" or "ar")
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

# Logging
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Nexa Studio"
    APP_TITLE: str = "Nexa Studio - Digital Services Agency"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Nexa Studio"
    ORGANIZATION_DOMAIN: str = "nexa.studio"

    # Submission backend
    # Simulated latency of the intake submission call
    SUBMIT_LATENCY_MS: int = _SUBMIT_LATENCY_MS
    SIMULATE_SUBMIT_FAILURE: bool = _SIMULATE_SUBMIT_FAILURE

    # Intake wizard
    # Delay between a successful submission and the wizard closing itself
    SUCCESS_DISMISS_DELAY_MS: int = _SUCCESS_DISMISS_DELAY_MS
    REFERENCE_PREFIX: str = "PRJ"
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Date/Time Formats
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "nexa_studio.log"
    LOG_LEVEL: str = _LOG_LEVEL  # console threshold, the file always gets DEBUG
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 640
    WIZARD_WIDTH: int = 720
    WIZARD_MIN_HEIGHT: int = 520
    STEP_SLIDE_OFFSET: int = 50  # px, page slide distance on step change
    STEP_SLIDE_DURATION_MS: int = 250

    # Branding Colors
    PRIMARY_COLOR: str = "#0B0B12"
    ACCENT_COLOR: str = "#7C3AED"
    ACCENT_HOVER: str = "#6D28D9"
    TEXT_COLOR: str = "#FFFFFF"
    TEXT_MUTED: str = "#9CA3AF"
    INPUT_BG: str = "#15151F"
    BORDER_COLOR: str = "#2A2A3A"
    STEP_INACTIVE: str = "#374151"
    SUCCESS_COLOR: str = "#22C55E"
    ERROR_COLOR: str = "#EF4444"
