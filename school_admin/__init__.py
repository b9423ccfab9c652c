#school_admin/__init__.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from school_admin.core.config import Settings, get_settings
from school_admin.core.database import close_db, create_engine_from_settings, create_session_factory, init_db
from school_admin.core.errors import BaseAPIError
from school_admin.core.logging import configure_logging, logger
from school_admin.core.security import CredentialStore, TokenService
from school_admin.middleware import AuthMiddleware, RequestIDMiddleware
from school_admin.routes import auth_router, classes_router, health_router, students_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from one immutable settings object.

    The engine, the password hasher and the token service are created here
    and handed to the middleware and request dependencies through
    ``app.state``.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    engine = create_engine_from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(engine)
        logger.info("Application startup completed")
        yield
        await close_db(engine)
        logger.info("Application shutdown completed")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Token-gated API for managing teachers, classes and students",
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    token_service = TokenService.from_settings(settings)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.credential_store = CredentialStore.from_settings(settings)
    app.state.token_service = token_service

    # Last added runs first: CORS, then request id, then the auth gate
    app.add_middleware(AuthMiddleware, token_service=token_service)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(classes_router)
    app.include_router(students_router)
    app.include_router(health_router)

    @app.exception_handler(BaseAPIError)
    async def api_error_handler(request: Request, exc: BaseAPIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"] if part != "body"),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})

    return app
