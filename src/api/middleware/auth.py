"""Authorization gate middleware.

Runs before routing: public paths pass straight through, every other path
(unknown ones included) needs valid Basic or Bearer credentials.
"""

import logging
from typing import Iterable

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from api.security import AUTH_REALM, authenticate

logger = logging.getLogger(__name__)

# Exact paths open to anonymous callers; everything else, docs included, needs credentials
PUBLIC_PATHS = frozenset({"/math/sum"})
# Everything below these prefixes is open too
PUBLIC_PREFIXES = ("/math/sum/",)


class AuthGateMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        public_paths: Iterable[str] = PUBLIC_PATHS,
        public_prefixes: Iterable[str] = PUBLIC_PREFIXES,
    ):
        super().__init__(app)
        self.public_paths = frozenset(public_paths)
        self.public_prefixes = tuple(public_prefixes)

    def is_public(self, path: str) -> bool:
        return path in self.public_paths or path.startswith(self.public_prefixes)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # CORS preflight carries no credentials
        if request.method == "OPTIONS" or self.is_public(request.url.path):
            return await call_next(request)

        authorization = request.headers.get("Authorization")
        if not authorization:
            return self._reject(request, "Not authenticated")

        # bcrypt is CPU bound, keep it off the event loop
        principal = await run_in_threadpool(authenticate, authorization)
        if not principal:
            return self._reject(request, "Invalid authentication credentials")

        request.state.principal = principal
        return await call_next(request)

    @staticmethod
    def _reject(request: Request, detail: str) -> JSONResponse:
        logger.info("Request rejected by auth gate", extra={
            "method": request.method,
            "path": request.url.path,
            "reason": detail,
        })
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": detail},
            headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'},
        )
