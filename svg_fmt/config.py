"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    svg_fmt_env: str = "development"
    svg_fmt_log_level: str = "warning"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> int:
    """Set up root logging for scripts using the library. Returns the numeric level.

    The library never calls this on import; unknown level names fall back to WARNING.
    """
    name = (level or settings.svg_fmt_log_level).upper()
    resolved = getattr(logging, name, None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    return resolved
