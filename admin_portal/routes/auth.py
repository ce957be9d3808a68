"""
Authentication routes: sign-up, sign-in/out, invites and password setup.
"""
from datetime import timedelta

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.user import User
from ..schemas.auth import (
    InviteRequest,
    SetPasswordRequest,
    SignInRequest,
    SignUpRequest,
    TokenRequest,
    UserResponse,
)
from ..auth import (
    TokenService,
    get_required_user,
    get_token_service,
    verify_password,
)
from ..config import Settings, get_settings
from ..limiter import limiter
from ..logging_config import auth_logger
from ..responses import success
from ..services.exceptions import ServiceError, UnauthorizedError, ValidationError
from ..services.invites import InviteWorkflow
from ..services.mailer import Mailer, get_mailer
from .crud import to_data

settings = get_settings()

router = APIRouter(prefix="/api", tags=["auth"])


def get_invite_workflow(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    mailer: Mailer = Depends(get_mailer),
    app_settings: Settings = Depends(get_settings),
) -> InviteWorkflow:
    return InviteWorkflow(db, tokens, mailer, app_settings)


def set_session_cookie(response: Response, token: str, app_settings: Settings) -> None:
    response.set_cookie(
        key=app_settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=app_settings.is_production,
        samesite="lax",
        max_age=int(timedelta(days=app_settings.session_cookie_max_age_days).total_seconds()),
        path="/",
    )


@router.post("/sign-up", status_code=201)
@limiter.limit(settings.sign_up_rate_limit)
def sign_up(request: Request, user_data: SignUpRequest, db: Session = Depends(get_db)):
    """Register a pending account. The password is set later through an invite link."""
    existing = db.query(User).filter(User.email == user_data.email).first()
    if existing:
        raise ValidationError("Email already registered")

    user = User(
        email=user_data.email,
        username=user_data.username,
        role=user_data.role,
        status="pending",
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        auth_logger.error("Failed to create user", error=e, email=user_data.email)
        raise ServiceError("Failed to create user")

    auth_logger.info("User signed up", user_id=user.id)
    return success(to_data(UserResponse, user), "User created")


@router.post("/sign-in")
@limiter.limit(settings.sign_in_rate_limit)
def sign_in(
    request: Request,
    response: Response,
    credentials: SignInRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Check credentials and set the session cookie."""
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise UnauthorizedError("Invalid email or password")
    if user.status != "active":
        raise UnauthorizedError("Account is not active")

    set_session_cookie(response, tokens.issue_session_token(user.id), tokens.settings)
    auth_logger.info("User signed in", user_id=user.id)
    return success(to_data(UserResponse, user))


@router.post("/sign-out")
def sign_out(response: Response, tokens: TokenService = Depends(get_token_service)):
    """Clear the session cookie."""
    response.delete_cookie(tokens.settings.session_cookie_name, path="/")
    return success(message="Signed out")


@router.get("/me")
def get_me(current_user: User = Depends(get_required_user)):
    """Get the signed-in user."""
    return success(to_data(UserResponse, current_user))


@router.post("/send-invite")
@limiter.limit(settings.invite_rate_limit)
def send_invite(
    request: Request,
    invite: InviteRequest,
    workflow: InviteWorkflow = Depends(get_invite_workflow),
):
    """Mark the user pending and email a set-password link."""
    user = workflow.send_invite(invite.email, invite.username, invite.role)
    return success(to_data(UserResponse, user), "Invitation sent")


@router.post("/validate-token")
def validate_token(body: TokenRequest, workflow: InviteWorkflow = Depends(get_invite_workflow)):
    """Check an invite/reset token without consuming it."""
    user = workflow.validate_token(body.token)
    return success(to_data(UserResponse, user), "Token is valid")


@router.patch("/set-password")
@limiter.limit(settings.sign_in_rate_limit)
def set_password(
    request: Request,
    body: SetPasswordRequest,
    workflow: InviteWorkflow = Depends(get_invite_workflow),
):
    """Set the password for the token's user and activate the account."""
    user = workflow.set_password(body.token, body.password)
    return success(to_data(UserResponse, user), "Password updated successfully")
