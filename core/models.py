"""Data models for the generative-AI proxy handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


class UpstreamName(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"


@dataclass(frozen=True)
class UpstreamTarget:
    """A fixed third-party endpoint and how its credential is attached."""

    name: str
    url: str
    env_vars: tuple[str, ...]
    auth_header: str
    auth_scheme: str = ""

    @property
    def primary_env_var(self) -> str:
        return self.env_vars[0]

    def auth_headers(self, api_key: str) -> dict[str, str]:
        return {
            self.auth_header: f"{self.auth_scheme}{api_key}",
            "Content-Type": "application/json",
        }


@dataclass
class ProxyResponse:
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    def to_vercel(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
