"""
Process entry point.

Serves the API over plain HTTP on `PORT`. When a readable TLS key and
certificate are found, the API is served over HTTPS on `HTTPS_PORT` instead and
the plain HTTP listener only redirects there.
"""

from __future__ import annotations
import asyncio
import logging
import os
import re
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from genai_showcase.core.config import Settings, settings
from genai_showcase.main import app, configure_logging


def resolve_https_files(config: Settings) -> Optional[tuple[str, str]]:
    """Return (key_path, cert_path) when both are readable, else None."""
    key_path = os.path.abspath(config.https_key_path)
    cert_path = os.path.abspath(config.https_cert_path)
    logging.info(f"HTTPS_KEY_PATH={os.getenv('HTTPS_KEY_PATH')} resolved to {key_path} (exists: {os.path.exists(key_path)})")
    logging.info(f"HTTPS_CERT_PATH={os.getenv('HTTPS_CERT_PATH')} resolved to {cert_path} (exists: {os.path.exists(cert_path)})")

    try:
        for path in (key_path, cert_path):
            with open(path, "rb") as f:
                f.read(1)
    except OSError:
        logging.warning("Could not read HTTPS certificate files. HTTPS will not be enabled.")
        return None
    return key_path, cert_path


def https_redirect_url(host: str, path: str, query: str, https_port: int) -> str:
    """Build the HTTPS URL for a plain HTTP request, swapping an explicit port for `https_port`."""
    target_host = re.sub(r":\d+$", f":{https_port}", host or "")
    url = f"https://{target_host}{path}"
    if query:
        url = f"{url}?{query}"
    return url


def build_redirect_app(https_port: int) -> FastAPI:
    redirect_app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @redirect_app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"])
    async def to_https(request: Request, path: str):
        target = https_redirect_url(
            request.headers.get("host", ""),
            request.url.path,
            request.url.query,
            https_port,
        )
        return RedirectResponse(target, status_code=301)

    return redirect_app


async def serve(config: Settings = settings) -> None:
    https_files = resolve_https_files(config)
    servers: list[uvicorn.Server] = []

    if https_files:
        key_path, cert_path = https_files
        servers.append(uvicorn.Server(uvicorn.Config(
            app,
            host="0.0.0.0",
            port=config.https_port,
            ssl_keyfile=key_path,
            ssl_certfile=cert_path,
        )))
        servers.append(uvicorn.Server(uvicorn.Config(
            build_redirect_app(config.https_port),
            host="0.0.0.0",
            port=config.port,
        )))
        logging.info(f"HTTPS server running on https://localhost:{config.https_port}")
    else:
        servers.append(uvicorn.Server(uvicorn.Config(app, host="0.0.0.0", port=config.port)))

    logging.info(f"HTTP server running on http://localhost:{config.port}")
    await asyncio.gather(*(server.serve() for server in servers))


def main() -> None:
    configure_logging()
    asyncio.run(serve())


if __name__ == "__main__":
    main()
