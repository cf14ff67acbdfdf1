"""
Middleware installers for Flask.

- Request ID injection (X-Request-ID in/out)
- Request timing (X-Response-Time-Ms header + access log line)
"""

from __future__ import annotations
import logging
import time
import uuid

from flask import Flask, g, request

log = logging.getLogger("Runtime")


def install_request_id(app: Flask) -> None:
    @app.before_request
    def _req_id():
        g.request_id = request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:12]}"

    @app.after_request
    def _stamp(response):
        response.headers["X-Request-ID"] = g.get("request_id", "-")
        return response


def install_timing(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g._t0 = time.perf_counter()

    @app.after_request
    def _stop_timer(response):
        t0 = g.get("_t0")
        if t0 is not None:
            ms = int((time.perf_counter() - t0) * 1000)
            response.headers["X-Response-Time-Ms"] = str(ms)
            log.info("%s %s -> %s in %dms", request.method, request.path, response.status_code, ms)
        return response
