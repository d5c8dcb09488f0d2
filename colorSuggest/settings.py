"""Service settings, read from COLOR_SUGGEST_* environment variables."""

import os
from typing import Literal, Mapping, Optional
from pydantic import BaseModel, Field

ENV_PREFIX = "COLOR_SUGGEST_"

class Settings(BaseModel):
    host: str = Field("0.0.0.0", description="Interface the server binds to")
    port: int = Field(8973, ge=1, le=65535, description="Port the server listens on")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field("INFO", description="Root logging level")
    default_limit: Optional[int] = Field(None, ge=1, description="Cap on suggestions returned when a request sets none")

def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Defaults overridden by any COLOR_SUGGEST_<FIELD> variables that are set."""
    if environ is None:
        environ = os.environ
    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw not in (None, ""):
            values[name] = raw
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()
    return Settings(**values)
