from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from contextlib import asynccontextmanager
import logging
import traceback

from loan_portal.api.member_routes import router as member_router
from loan_portal.api.request_routes import router as request_router
from loan_portal.api.service_routes import router as service_router
from loan_portal.core import settings, first_validation_message
from loan_portal.database.connection import init_db
from loan_portal.services.catalog_service import catalog_service


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds security headers to all API responses.

    OPTIONS requests are left to CORSMiddleware, which is registered after this
    middleware and therefore runs first.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        if request.method != "OPTIONS":
            response.headers["X-Content-Type-Options"] = "nosniff"
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
            response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    if settings.SEED_SERVICES:
        await catalog_service.seed_services()
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Loan services, loan requests and membership for the micro-finance portal",
    version="1.0.0",
    lifespan=lifespan
)


logger = logging.getLogger("server_exception_handler")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTPException handled: {exc.status_code} {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = first_validation_message(exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # Log the traceback, return only a generic message
    tb = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(exc)}\n{tb}")
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"})


# Support comma-separated CLIENT_URL values (e.g. "http://localhost:3000,http://localhost:3001")
raw_origins = settings.CLIENT_URL or ""
allowed_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

# Middleware runs LIFO: CORS is added last so it handles preflight first
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=3600,
)

app.include_router(service_router, prefix=settings.API_PREFIX)
app.include_router(request_router, prefix=settings.API_PREFIX)
app.include_router(member_router, prefix=settings.API_PREFIX)

@app.get("/")
async def root():
    return {"message": "Micro-finance service portal API is running!"}

@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "API is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("loan_portal.main:app", host="0.0.0.0", port=settings.PORT)
