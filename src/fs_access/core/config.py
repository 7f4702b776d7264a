"""Configuration management for fs-access."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"
    otel_enabled: bool = False
    otel_service_name: str = "fs-access"

    # Gates the `test -x` subprocess used by the POSIX execute probe
    allow_spawn: bool = True
    executable_strategy: Literal["auto", "posix", "extension"] = "auto"
    scratch_prefix: str = ".fs_access_probe_"

    model_config = {
        "env_prefix": "FS_ACCESS_",
        "case_sensitive": False,
    }


settings = Settings()
