"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- HTTP API ----------------------------------------------------------
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8080")))
    api_reload: bool = field(
        default_factory=lambda: os.getenv("API_RELOAD", "false").lower() == "true"
    )
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    # --- IP geolocation ----------------------------------------------------
    geolocation_api_url: str = field(
        default_factory=lambda: os.getenv("GEOLOCATION_API_URL", "http://ip-api.com")
    )
    geolocation_timeout: float = field(
        default_factory=lambda: float(os.getenv("GEOLOCATION_TIMEOUT", "10.0"))
    )

    # --- Formatters --------------------------------------------------------
    sql_indent_width: int = field(
        default_factory=lambda: int(os.getenv("SQL_INDENT_WIDTH", "4"))
    )
    sql_lines_between_queries: int = field(
        default_factory=lambda: int(os.getenv("SQL_LINES_BETWEEN_QUERIES", "2"))
    )
    js_indent_size: int = field(default_factory=lambda: int(os.getenv("JS_INDENT_SIZE", "4")))

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", "logs/convkit.log"))
    conversion_log_file: str = field(
        default_factory=lambda: os.getenv("CONVERSION_LOG_FILE", "logs/conversions.jsonl")
    )

    # --- Guardrails --------------------------------------------------------
    max_input_length: int = field(
        default_factory=lambda: int(os.getenv("MAX_INPUT_LENGTH", "5000000"))
    )


# Module-level singleton -- import this everywhere.
settings = Settings()
