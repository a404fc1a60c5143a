"""
Site model — the build configuration of the deployed site.

Loaded from site.yml, this is what the external framework needs at its
own build time (target URL, rendering mode, edge adapter) plus the
settings of the build-time IndexNow key file.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

# Environment variable that carries the IndexNow token by default
DEFAULT_KEY_ENV_VAR = "INDEXNOW_API_KEY_NAME"


class OutputMode(str, Enum):
    """Rendering mode passed through to the framework."""

    SERVER = "server"
    STATIC = "static"


class IndexNowSettings(BaseModel):
    """Where the IndexNow verification token comes from."""

    key: str | None = None
    env_var: str = DEFAULT_KEY_ENV_VAR

    @field_validator("key", mode="before")
    @classmethod
    def _key_as_text(cls, value: object) -> object:
        # YAML reads an all-digit key as int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SiteConfig(BaseModel):
    """Root site configuration — loaded from site.yml.

    ``adapter`` names the edge-hosting plugin; an empty string means the
    build is not packaged for any specific host.
    """

    site: str
    output: OutputMode = OutputMode.SERVER
    adapter: str = "cloudflare"
    public_dir: str = "public"
    indexnow: IndexNowSettings = Field(default_factory=IndexNowSettings)

    @field_validator("site")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"site must be an absolute http(s) URL, got {value!r}")
        return value

    @field_validator("adapter")
    @classmethod
    def _normalize_adapter(cls, value: str) -> str:
        return value.strip().lower()

    def key_location(self, key: str) -> str:
        """Public URL where the key file will be served."""
        return f"{self.site.rstrip('/')}/{key}.txt"
