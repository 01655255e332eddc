import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from modulepreload.core.specifiers import path_to_uri

_DEFAULT_STATIC_SUBDIR = "packages"


class ServerConfig(BaseModel):
    """Process-wide settings, fixed at startup and passed into ``create_app``."""

    static_root: Path
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    script_extension: str = ".js"

    @field_validator("static_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("script_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"Script extension must look like '.js', got '{value}'")
        return value

    @property
    def base_uri(self) -> str:
        """``file://`` URI of the static root, without a trailing slash."""
        return path_to_uri(self.static_root).rstrip("/")

    @classmethod
    def from_env(cls, **overrides: object) -> "ServerConfig":
        values: dict[str, object] = {
            "static_root": os.getenv("MODULEPRELOAD_STATIC_ROOT", str(Path.cwd() / _DEFAULT_STATIC_SUBDIR)),
            "host": os.getenv("MODULEPRELOAD_HOST", "127.0.0.1"),
            "port": os.getenv("MODULEPRELOAD_PORT", "8000"),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(values)
