"""
FastAPI Middleware

Client address resolution, request logging, security headers and static
asset serving.
"""

import ipaddress
import os
import time
from pathlib import Path
from typing import Awaitable, Callable, Iterable, List, Optional, Sequence, Tuple

from fastapi import Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

from modcatalog.core.config import TrustProxySetting
from modcatalog.core.logger import get_logger

logger = get_logger(__name__)

TrustPredicate = Callable[[str, int], bool]

NAMED_RANGES = {
    "loopback": ("127.0.0.1/8", "::1/128"),
    "linklocal": ("169.254.0.0/16", "fe80::/10"),
    "uniquelocal": ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16", "fc00::/7"),
}

# Successful responses under these prefixes are not logged
QUIET_PREFIXES = ("/js", "/css")


def compile_trust(setting: TrustProxySetting) -> TrustPredicate:
    """
    Build a predicate ``(address, hop) -> trusted`` for a proxy setting.

    ``True``/``False`` trust every/no hop, a number trusts the hops
    closest to the server, and a string is a comma-separated list of
    addresses, CIDR ranges or the names in ``NAMED_RANGES``.
    """
    if setting is True or setting is False:
        return lambda _address, _hop: setting
    if isinstance(setting, (int, float)):
        return lambda _address, hop: hop < setting

    networks = []
    for token in str(setting).split(","):
        token = token.strip()
        if not token:
            continue
        for item in NAMED_RANGES.get(token, (token,)):
            networks.append(ipaddress.ip_network(item, strict=False))

    def trusted(address: str, _hop: int) -> bool:
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            return False
        return any(ip in network for network in networks)

    return trusted


def resolve_client_address(
    socket_address: str, forwarded_for: Optional[str], trust: TrustPredicate
) -> str:
    """Walk X-Forwarded-For from the server outwards until an untrusted hop."""
    addresses = [socket_address]
    if forwarded_for:
        addresses.extend(
            reversed([part.strip() for part in forwarded_for.split(",") if part.strip()])
        )

    for hop, address in enumerate(addresses[:-1]):
        if not trust(address, hop):
            return address
    return addresses[-1]


class ClientAddressMiddleware:
    """
    Rewrite the ASGI client address and scheme from proxy headers.

    Only hops accepted by the trust setting are skipped; with trust disabled
    the socket peer is kept as-is.
    """

    def __init__(self, app: ASGIApp, trust_proxy: TrustProxySetting = False) -> None:
        self.app = app
        self.trust = compile_trust(trust_proxy)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket") and scope.get("client"):
            host, port = scope["client"]
            headers = dict(scope["headers"])

            forwarded_for = headers.get(b"x-forwarded-for")
            client = resolve_client_address(
                host, forwarded_for.decode("latin-1") if forwarded_for else None, self.trust
            )
            if client != host:
                scope["client"] = (client, 0)

            forwarded_proto = headers.get(b"x-forwarded-proto")
            if forwarded_proto and self.trust(host, 0):
                proto = forwarded_proto.decode("latin-1").split(",")[0].strip().lower()
                if proto in ("http", "https"):
                    scope["scheme"] = proto if scope["type"] == "http" else proto.replace("http", "ws")

        await self.app(scope, receive, send)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with status and duration.

    Successful asset requests (``/js``, ``/css``) are skipped to keep the log
    readable.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        target = f"{path}?{request.url.query}" if request.url.query else path
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed: %-15s - %-4s %s - %s (%.3fms)",
                client_ip,
                method,
                target,
                str(e),
                duration_ms,
                exc_info=True,
            )
            raise

        status = response.status_code
        if status < 400 and path.startswith(QUIET_PREFIXES):
            return response

        duration_ms = (time.perf_counter() - start_time) * 1000
        args = (client_ip, method, target, status, duration_ms)
        if status >= 500:
            logger.error("%-15s - %-4s %s %d %.3fms", *args)
        elif status >= 400:
            logger.warning("%-15s - %-4s %s %d %.3fms", *args)
        else:
            logger.info("%-15s - %-4s %s %d %.3fms", *args)
        return response


def build_content_security_policy(script_src: Sequence[str]) -> str:
    directives: List[Tuple[str, Iterable[str]]] = [
        ("default-src", ["*"]),
        ("base-uri", ["'self'"]),
        ("font-src", ["'self'", "https:", "data:"]),
        ("form-action", ["'self'"]),
        ("frame-ancestors", ["'self'"]),
        ("img-src", ["*"]),
        ("object-src", ["'none'"]),
        ("script-src", script_src),
        ("script-src-attr", ["'none'"]),
        ("style-src", ["'self'", "https:", "'unsafe-inline'"]),
        ("upgrade-insecure-requests", []),
    ]
    return ";".join(" ".join([name, *values]) for name, values in directives)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach the standard set of browser security headers to every response."""

    def __init__(
        self, app: ASGIApp, script_src: Sequence[str], hsts_max_age: int = 15552000
    ) -> None:
        super().__init__(app)
        self.headers = {
            "Content-Security-Policy": build_content_security_policy(script_src),
            "Origin-Agent-Cluster": "?1",
            "Referrer-Policy": "same-origin",
            "Strict-Transport-Security": f"max-age={hsts_max_age}; includeSubDomains",
            "X-Content-Type-Options": "nosniff",
            "X-DNS-Prefetch-Control": "off",
            "X-Download-Options": "noopen",
            "X-Frame-Options": "SAMEORIGIN",
            "X-Permitted-Cross-Domain-Policies": "none",
            "X-XSS-Protection": "0",
        }

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response


class StaticAssetsMiddleware:
    """
    Serve files from a sequence of directories before routing.

    Directories are tried in order. A directory created with
    ``html_extension=True`` also answers ``/page`` with ``page.html`` and a
    directory request with its ``index.html``. Requests that match no file
    fall through to the application.
    """

    def __init__(
        self, app: ASGIApp, directories: Sequence[Tuple[Path, bool]]
    ) -> None:
        self.app = app
        self.roots = [
            (StaticFiles(directory=str(directory), html=html_extension, check_dir=False), html_extension)
            for directory, html_extension in directories
        ]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in ("GET", "HEAD"):
            await self.app(scope, receive, send)
            return

        path = os.path.normpath(os.path.join(*scope["path"].split("/")))
        for static, html_extension in self.roots:
            candidates = [path]
            if html_extension and not os.path.splitext(path)[1]:
                candidates.append(f"{path}.html")
            for candidate in candidates:
                try:
                    response = await static.get_response(candidate, scope)
                except StarletteHTTPException as exc:
                    if exc.status_code == 404:
                        continue
                    raise
                await response(scope, receive, send)
                return

        await self.app(scope, receive, send)


__all__ = [
    "ClientAddressMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "StaticAssetsMiddleware",
    "build_content_security_policy",
    "compile_trust",
    "resolve_client_address",
]
