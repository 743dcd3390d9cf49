"""Shared request pipeline for the serverless proxy handlers.

Every handler runs the same linear sequence: method check, credential lookup,
body normalization, one outbound POST, then a verbatim relay of the upstream
status and body. Upstream 4xx/5xx responses are relayed, not translated.
"""

from __future__ import annotations

import base64
import json
import logging
import os
from collections.abc import Mapping
from typing import Any

import httpx

from core.models import ProxyResponse, UpstreamTarget
from core.providers import resolve_api_key

logger = logging.getLogger(__name__)

TIMEOUT_ENV_VAR = "PROXY_TIMEOUT_S"


def error_response(status_code: int, message: str) -> ProxyResponse:
    body = json.dumps({"error": message}, separators=(",", ":"), ensure_ascii=False)
    return ProxyResponse(status_code=status_code, body=body)


def request_method(request: Any) -> str | None:
    if isinstance(request, Mapping):
        return request.get("method") or request.get("httpMethod")
    return getattr(request, "method", None)


def request_body(request: Any) -> Any:
    if isinstance(request, Mapping):
        body = request.get("body")
        if request.get("isBase64Encoded") and isinstance(body, str):
            return base64.b64decode(body)
        return body
    return getattr(request, "body", None)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON token {token}")


def normalize_payload(body: Any) -> Any:
    """Parse string bodies as JSON; falsy scalars become an empty object."""
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        return json.loads(body or "{}", parse_constant=_reject_constant)
    if body is None or (not isinstance(body, (dict, list)) and not body):
        return {}
    return body


def _timeout() -> float | None:
    raw = os.environ.get(TIMEOUT_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{TIMEOUT_ENV_VAR} must be a number, got {raw!r}") from e


def forward(
    target: UpstreamTarget,
    payload: Any,
    api_key: str,
    client: httpx.Client | None = None,
) -> httpx.Response:
    """POST the payload to the target and return the raw upstream response."""
    content = json.dumps(
        payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")
    headers = target.auth_headers(api_key)

    if client is not None:
        return client.post(target.url, headers=headers, content=content)

    with httpx.Client(timeout=_timeout()) as http:
        return http.post(target.url, headers=headers, content=content)


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def proxy_request(
    request: Any,
    target: UpstreamTarget,
    client: httpx.Client | None = None,
) -> ProxyResponse:
    method = request_method(request)
    if method != "POST":
        logger.warning("Rejected %s request for %s", method, target.name)
        return error_response(405, "Only POST")

    api_key = resolve_api_key(*target.env_vars)
    if not api_key:
        logger.warning("%s is not set; refusing to call %s", target.primary_env_var, target.name)
        return error_response(500, f"{target.primary_env_var} is missing")

    try:
        payload = normalize_payload(request_body(request))
        upstream = forward(target, payload, api_key, client=client)
        text = upstream.text
    except Exception as e:
        logger.exception("Proxy to %s failed", target.name)
        return error_response(500, f"proxy error: {_describe(e)}")

    logger.info("Relayed %s response status=%d", target.name, upstream.status_code)
    return ProxyResponse(status_code=upstream.status_code, body=text)
