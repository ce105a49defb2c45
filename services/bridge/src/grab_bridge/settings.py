import os
from pathlib import Path
from pydantic import BaseModel, Field


class Settings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 3344

    # Transport limits
    max_body_bytes: int = 200 * 1024

    # Where normalized src/... paths are looked up, in order
    workspace_roots: list[str] = Field(default_factory=lambda: [str(Path.cwd())])

    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _split(value: str, sep: str) -> list[str]:
    return [x.strip() for x in value.split(sep) if x.strip()]


def load_settings() -> Settings:
    roots = _split(os.getenv("GRAB_BRIDGE_WORKSPACE_ROOTS", ""), os.pathsep)
    return Settings(
        host=os.getenv("GRAB_BRIDGE_HOST", "127.0.0.1"),
        port=int(os.getenv("GRAB_BRIDGE_PORT", "3344")),
        max_body_bytes=int(os.getenv("GRAB_BRIDGE_MAX_BODY_BYTES", str(200 * 1024))),
        workspace_roots=roots or [str(Path.cwd())],
        allow_origins=_split(os.getenv("GRAB_BRIDGE_ALLOW_ORIGINS", "*"), ","),
        log_level=os.getenv("GRAB_BRIDGE_LOG_LEVEL", "INFO").upper(),
    )
