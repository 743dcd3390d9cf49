"""Local development server for the proxy handlers.

Serves the same routes Vercel exposes (``/api/gemini`` and ``/api/openai``)
so the handlers can be exercised without deploying:

    python -m app.dev_server --port 3000
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from api.gemini import handler as gemini_handler
from api.openai import handler as openai_handler
from core.models import JSON_HEADERS

logger = logging.getLogger(__name__)

ROUTES = {
    "/api/gemini": gemini_handler,
    "/api/openai": openai_handler,
}

NOT_FOUND_BODY = '{"error":"Not found"}'


@dataclass
class DevRequest:
    method: str
    path: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


def dispatch(request: DevRequest) -> dict:
    """Route a request to its handler, mirroring the hosted router."""
    route = urlparse(request.path).path.rstrip("/")
    handler = ROUTES.get(route)
    if handler is None:
        return {"statusCode": 404, "headers": dict(JSON_HEADERS), "body": NOT_FOUND_BODY}
    return handler(request)


class DevRequestHandler(BaseHTTPRequestHandler):
    def _serve(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        request = DevRequest(
            method=self.command,
            path=self.path,
            body=body,
            headers=dict(self.headers.items()),
        )

        result = dispatch(request)
        payload = result["body"].encode("utf-8")

        self.send_response(result["statusCode"])
        for name, value in result["headers"].items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(payload)

    do_GET = _serve
    do_POST = _serve
    do_PUT = _serve
    do_PATCH = _serve
    do_DELETE = _serve
    do_HEAD = _serve
    do_OPTIONS = _serve

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


def build_server(host: str, port: int) -> ThreadingHTTPServer:
    return ThreadingHTTPServer((host, port), DevRequestHandler)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the proxy handlers locally.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())

    server = build_server(args.host, args.port)
    logger.info("Serving %s on http://%s:%d", ", ".join(ROUTES), args.host, args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
