from supabase import AuthError, Client
from allergyscan.core.session import Session, SessionRegistry
from allergyscan.modules.auth.schemas import LoginRequest, SignUpRequest, SignUpResponse, TokenResponse
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def _auth_error(e: AuthError) -> HTTPException:
    """Surface the provider's own message and status."""
    status = getattr(e, "status", None) or 400
    message = getattr(e, "message", None) or str(e)
    return HTTPException(status_code=status, detail=message)


class AuthService:
    def __init__(self, supabase: Client, sessions: SessionRegistry):
        self.supabase = supabase
        self.sessions = sessions

    def sign_up(self, signup_data: SignUpRequest) -> SignUpResponse:
        """Register a new user using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": signup_data.email,
                "password": signup_data.password,
            })
        except AuthError as e:
            raise _auth_error(e)
        except Exception as e:
            logger.error(f"Sign-up failed: {e}")
            raise HTTPException(status_code=500, detail="Authentication service unavailable")

        if not auth_response.user:
            raise HTTPException(status_code=400, detail="Failed to register user")

        return SignUpResponse(
            user_id=auth_response.user.id,
            email=auth_response.user.email or signup_data.email,
            message="Account created successfully"
        )

    def sign_in(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user with email and password"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except AuthError as e:
            raise _auth_error(e)
        except Exception as e:
            logger.error(f"Sign-in failed: {e}")
            raise HTTPException(status_code=500, detail="Authentication service unavailable")

        if not auth_response.user or not auth_response.session:
            raise HTTPException(status_code=401, detail="Invalid login credentials")

        session = Session(
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email,
            access_token=auth_response.session.access_token,
        )
        self.sessions.put(session)
        return TokenResponse(
            access_token=session.access_token,
            refresh_token=auth_response.session.refresh_token or "",
            user_id=session.user_id,
            email=session.email
        )

    def get_session(self, token: str) -> Session:
        """Resolve the session behind a bearer token, from the registry when cached."""
        session = self.sessions.get(token)
        if session is not None:
            return session
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.info(f"Token rejected: {e}")
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        if not user_response or not user_response.user:
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        user = user_response.user
        session = Session(user_id=user.id, email=user.email or "", access_token=token)
        self.sessions.put(session)
        return session

    def sign_out(self, session: Session) -> None:
        """End the session with Supabase Auth and drop it from the registry"""
        try:
            self.supabase.auth.admin.sign_out(session.access_token)
        except AuthError as e:
            raise _auth_error(e)
        except Exception as e:
            logger.error(f"Sign-out failed: {e}")
            raise HTTPException(status_code=500, detail="Authentication service unavailable")
        finally:
            self.sessions.remove(session.access_token)
