"""
Core dependencies for route protection and per-request collaborators
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from allergyscan.config import settings
from allergyscan.core.session import Session, SessionRegistry
from allergyscan.database.supabase_client import SupabaseClient, get_supabase
from allergyscan.modules.auth.service import AuthService
from allergyscan.modules.analysis.gemini_client import GeminiClient
from allergyscan.modules.ocr.text_extractor import TextExtractor
from supabase import Client
from typing import Iterator
import threading
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

_gemini_client: GeminiClient = None
_registry_lock = threading.Lock()


def get_session_registry(request: Request) -> SessionRegistry:
    registry = getattr(request.app.state, "sessions", None)
    if registry is not None:
        return registry
    # Startup hook has not run (e.g. app mounted without lifespan)
    with _registry_lock:
        registry = getattr(request.app.state, "sessions", None)
        if registry is None:
            registry = SessionRegistry(settings.session_cache_ttl_sec, settings.session_cache_max_size)
            request.app.state.sessions = registry
    return registry


def get_auth_service(
    supabase: Client = Depends(get_supabase),
    sessions: SessionRegistry = Depends(get_session_registry)
) -> AuthService:
    return AuthService(supabase, sessions)


def get_current_session(
    credentials: HTTPAuthorizationCredentials = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Session:
    """Resolve the bearer token into a Session; 401 for anonymous callers"""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth_service.get_session(credentials.credentials)


def get_user_supabase(session: Session = Depends(get_current_session)) -> Iterator[Client]:
    """Supabase client acting as the session's user, closed when the request is done."""
    client = SupabaseClient.get_client_for_token(session.access_token)
    try:
        yield client
    finally:
        SupabaseClient.close_client(client)


def get_text_extractor() -> TextExtractor:
    return TextExtractor()


def get_analysis_client() -> GeminiClient:
    global _gemini_client
    if _gemini_client is None:
        try:
            _gemini_client = GeminiClient()
        except ValueError as e:
            logger.error(f"Gemini client unavailable: {e}")
            raise HTTPException(status_code=503, detail="Analysis service is not configured")
    return _gemini_client
