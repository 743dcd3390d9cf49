"""Upstream API targets and credential resolution."""

from __future__ import annotations

import os

from core.models import UpstreamName, UpstreamTarget

GEMINI_IMAGE = UpstreamTarget(
    name=UpstreamName.GEMINI.value,
    url=(
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-2.5-flash-image-preview:generateContent"
    ),
    env_vars=("GOOGLE_AI_STUDIO_API_KEY", "GOOGLE_AI_API_KEY"),
    auth_header="x-goog-api-key",
)

OPENAI_CHAT = UpstreamTarget(
    name=UpstreamName.OPENAI.value,
    url="https://api.openai.com/v1/chat/completions",
    env_vars=("OPENAI_API_KEY",),
    auth_header="Authorization",
    auth_scheme="Bearer ",
)


def resolve_api_key(*env_names: str) -> str | None:
    """Return the first non-empty env var, unmodified."""
    for name in env_names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def get_target(name: str) -> UpstreamTarget:
    """Factory function to get an upstream target by name."""
    targets: dict[str, UpstreamTarget] = {
        UpstreamName.GEMINI.value: GEMINI_IMAGE,
        UpstreamName.OPENAI.value: OPENAI_CHAT,
    }
    if name not in targets:
        raise ValueError(f"Unknown upstream: {name}. Available: {list(targets.keys())}")
    return targets[name]
