from fastapi import APIRouter, Depends
from allergyscan.core.dependencies import get_auth_service, get_current_session
from allergyscan.core.session import Session
from allergyscan.modules.auth.schemas import (
    LoginRequest, SignUpRequest, SignUpResponse, TokenResponse, CurrentUserResponse
)
from allergyscan.modules.auth.service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SignUpResponse, status_code=201)
async def signup(
    signup_data: SignUpRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Create an account"""
    return service.sign_up(signup_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.sign_in(login_data)


@router.post("/logout", status_code=200)
async def logout(
    session: Session = Depends(get_current_session),
    service: AuthService = Depends(get_auth_service)
):
    """Sign out and forget the session"""
    service.sign_out(session)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(session: Session = Depends(get_current_session)):
    return CurrentUserResponse(id=session.user_id, email=session.email)
