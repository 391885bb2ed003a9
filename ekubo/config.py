"""
Configuration settings for the ekubo math package

Loads environment variables and provides codegen / logging configuration.
"""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Package settings"""

    # Logging
    LOG_LEVEL: str = os.getenv("EKUBO_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Codegen (build time only)
    # log10(2**256) ~= 78, so 250 significant digits is plenty
    MIN_CODEGEN_PRECISION: int = 250
    CODEGEN_PRECISION: int = int(os.getenv("EKUBO_CODEGEN_PRECISION", 250))
    TICK_TABLE_PATH: str = os.getenv(
        "EKUBO_TICK_TABLE_PATH",
        str(Path(__file__).resolve().parent / "math" / "tick_constants.py")
    )

    def get_log_level(self) -> int:
        """Get numeric log level, WARNING for unknown names"""
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING


# Create global settings instance
settings = Settings()


def setup_logging(name: str = "ekubo") -> logging.Logger:
    """Attach a stream handler to the package logger (idempotent)"""
    logger = logging.getLogger(name)
    logger.setLevel(settings.get_log_level())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(settings.get_log_level())
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        logger.addHandler(handler)

    return logger
