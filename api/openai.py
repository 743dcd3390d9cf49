"""Vercel serverless function proxying chat-completion requests to OpenAI."""

from __future__ import annotations

from core.proxy import proxy_request
from core.providers import OPENAI_CHAT


def handler(request):
    """Vercel Python serverless function handler."""
    return proxy_request(request, OPENAI_CHAT).to_vercel()
