# SPDX-FileCopyrightText: 2025 steam-exporter contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""WSGI surface: home page, Prometheus metrics and version information."""

from __future__ import annotations

import json
import logging
import socket
from collections.abc import Callable, Iterable
from typing import Any
from wsgiref.simple_server import WSGIRequestHandler, make_server

from prometheus_client import CollectorRegistry, make_wsgi_app
from prometheus_client.exposition import ThreadingWSGIServer

from ..utils import parse_listen_address

logger = logging.getLogger(__name__)

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]

HOME_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>steam-exporter</title>
</head>
<body>
  <h1>steam-exporter</h1>
  <p>Prometheus exporter for Source engine game servers.</p>
  <ul>
    <li><a href="metrics">Metrics</a></li>
    <li><a href="version">Version</a></li>
  </ul>
</body>
</html>
"""


def create_app(registry: CollectorRegistry, *, version: str, commit: str) -> WSGIApp:
    """Build the exporter WSGI application around a dedicated registry."""
    metrics_app = make_wsgi_app(registry)
    home_body = HOME_PAGE.encode("utf-8")

    def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        path = environ.get("PATH_INFO") or "/"

        if path == "/metrics":
            return metrics_app(environ, start_response)

        if path == "/":
            start_response("200 OK", [("Content-Type", "text/html; charset=utf-8")])
            return [home_body]

        if path == "/version":
            body = json.dumps({"commit": commit, "version": version}).encode("utf-8") + b"\n"
            start_response("200 OK", [("Content-Type", "application/json")])
            return [body]

        start_response("404 Not Found", [("Content-Type", "text/plain; charset=utf-8")])
        return [b"404 page not found\n"]

    return app


class _QuietHandler(WSGIRequestHandler):
    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


def _best_family(host: str, port: int) -> tuple[socket.AddressFamily, str]:
    """Address family and bind host for a listen address (IPv4 or IPv6)."""
    infos = socket.getaddrinfo(host or None, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE)
    family, _, _, _, sockaddr = infos[0]
    return family, sockaddr[0]


def build_server(app: WSGIApp, listen_address: str) -> ThreadingWSGIServer:
    """Bind a threaded WSGI server for `app` on `listen_address`."""
    host, port = parse_listen_address(listen_address)
    family, bind_host = _best_family(host, port)

    class _Server(ThreadingWSGIServer):
        address_family = family

    return make_server(bind_host, port, app, _Server, handler_class=_QuietHandler)


def serve(app: WSGIApp, listen_address: str) -> None:
    """Serve `app` until interrupted."""
    httpd = build_server(app, listen_address)
    logger.info("Listening on %s ...", listen_address)
    try:
        httpd.serve_forever()
    finally:
        httpd.server_close()


__all__ = ["HOME_PAGE", "build_server", "create_app", "serve"]
