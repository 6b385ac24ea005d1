from __future__ import annotations
import os
from dataclasses import dataclass, field

def _env(name: str, default: str) -> str:
    return os.getenv(f"USERS_API_{name}", default)

@dataclass(frozen=True)
class Settings:
    APP_TITLE: str = "Users API"
    HOST: str = field(default_factory=lambda: _env("HOST", "localhost"))
    PORT: int = field(default_factory=lambda: int(_env("PORT", "8080")))
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # uvicorn has no separate read/write timeouts; this covers idle connections.
    TIMEOUT_KEEP_ALIVE: int = 60
    REQUEST_ID_HEADER: str = "X-Request-ID"

settings = Settings()
