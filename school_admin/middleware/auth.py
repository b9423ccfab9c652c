from typing import Iterable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from school_admin.core.errors import MissingTokenError, TokenError
from school_admin.core.logging import logger, redact_tokens
from school_admin.core.security import TokenService

BEARER_PREFIX = "Bearer "

PUBLIC_PATHS = frozenset({
    '/register',
    '/login',
    '/public/students',
    '/health',
    '/docs',
    '/docs/oauth2-redirect',
    '/redoc',
    '/openapi.json',
})


class AuthMiddleware(BaseHTTPMiddleware):
    """Gate every non-public request on a valid bearer token.

    No token gives 401, a token that fails verification gives 400; in both
    cases the endpoint is never called. On success the verified claim is
    stored on ``request.state.user``.
    """

    def __init__(self, app, token_service: TokenService, exclude_paths: Optional[Iterable[str]] = None):
        super().__init__(app)
        self.token_service = token_service
        self.exclude_paths = frozenset(exclude_paths) if exclude_paths is not None else PUBLIC_PATHS

    def _is_public(self, path: str) -> bool:
        # "/register/" is the same route as "/register"
        return path in self.exclude_paths or path.rstrip("/") in self.exclude_paths

    @staticmethod
    def _extract_token(request: Request) -> Optional[str]:
        """Extract token from the Authorization header"""
        auth_header = request.headers.get('Authorization')
        if not auth_header or not auth_header.startswith(BEARER_PREFIX):
            return None
        token = auth_header[len(BEARER_PREFIX):].strip()
        return token or None

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        """Process the request and handle authentication"""

        # Skip middleware for excluded paths and OPTIONS requests
        if request.method == "OPTIONS" or self._is_public(request.url.path):
            return await call_next(request)

        try:
            token = self._extract_token(request)
            if not token:
                logger.warning(f"No authentication token provided for {request.url.path}")
                error = MissingTokenError()
                return JSONResponse(status_code=error.status_code, content=error.to_content())

            try:
                identity = self.token_service.verify(token)
            except TokenError as token_err:
                logger.warning(
                    f"Token rejected for {request.url.path}: "
                    f"{redact_tokens(token_err.details.get('reason'))}"
                )
                return JSONResponse(status_code=token_err.status_code, content=token_err.to_content())

        except Exception:
            logger.error("Auth middleware error", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Internal server error"}
            )

        request.state.user = identity
        request.state.user_id = identity.get('id')
        return await call_next(request)
