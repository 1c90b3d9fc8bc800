"""
Main settings object.
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Sent as the `token` form field on every request; never modified.
    token: str | None = None

    base_url: str = "https://slack.com/api/"
    # Default per-request timeout, in seconds.
    timeout: float = 30.0

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(env_prefix="USERGROUPS_", env_file=".env")

    @property
    def api_url(self) -> str:
        return self.base_url if self.base_url.endswith("/") else self.base_url + "/"

    @property
    def log_level_number(self) -> int:
        match self.log_level.upper():
            case "DEBUG":
                return logging.DEBUG
            case "INFO":
                return logging.INFO
            case "WARNING":
                return logging.WARNING
            case "ERROR":
                return logging.ERROR
            case _:
                raise ValueError(f"Unknown log level {self.log_level}")
