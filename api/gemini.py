"""Vercel serverless function proxying image-generation requests to Gemini.

Accepts POST only. The server-held Google AI Studio key is attached as the
``x-goog-api-key`` header and the upstream response is relayed as-is.
"""

from __future__ import annotations

from core.proxy import proxy_request
from core.providers import GEMINI_IMAGE


def handler(request):
    """Vercel Python serverless function handler."""
    return proxy_request(request, GEMINI_IMAGE).to_vercel()
