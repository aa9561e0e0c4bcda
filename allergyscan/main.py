import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from allergyscan.config import settings
from allergyscan.core.rate_limit import limiter
from allergyscan.core.session import SessionRegistry
from allergyscan.database.supabase_client import SupabaseClient
from allergyscan.modules.auth import routes as auth_routes
from allergyscan.modules.dashboard import routes as dashboard_routes
from allergyscan.modules.allergies import routes as allergies_routes
from allergyscan.modules.scans import routes as scans_routes
from allergyscan.modules.scan_history import routes as scan_history_routes
from allergyscan.modules.recommendations import routes as recommendations_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(dashboard_routes.router, prefix="/api/v1")
app.include_router(allergies_routes.router, prefix="/api/v1")
app.include_router(scans_routes.router, prefix="/api/v1")
app.include_router(scan_history_routes.router, prefix="/api/v1")
app.include_router(recommendations_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    app.state.sessions = SessionRegistry(settings.session_cache_ttl_sec, settings.session_cache_max_size)
    logger.info("Application startup")


@app.on_event("shutdown")
async def shutdown_event():
    sessions = getattr(app.state, "sessions", None)
    if sessions is not None:
        sessions.clear()
    SupabaseClient.reset_client()
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": "Welcome to allergyscan", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    return {"status": "ready"}
