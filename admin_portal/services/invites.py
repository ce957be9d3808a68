"""
Invite / password-reset workflow.

send_invite marks the user pending, stores the digest of a fresh one-time
token and emails the raw token as a link. When the email cannot be sent
the attempt is compensated: a user created by this attempt is deleted,
otherwise the stored token is removed and the previous status restored.

Every way a token can be unusable (bad signature, expired, unknown digest,
already used) surfaces as the same "Invalid or expired token" error.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth import ONE_TIME_TOKEN, TokenService, get_password_hash, hash_token
from ..config import Settings
from ..logging_config import auth_logger
from ..models.password_reset import PasswordResetToken
from ..models.user import User
from .exceptions import MailDeliveryError, ServiceError, UnauthorizedError, ValidationError
from .mailer import Mailer

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class InviteWorkflow:
    def __init__(self, db: Session, tokens: TokenService, mailer: Mailer, settings: Settings):
        self.db = db
        self.tokens = tokens
        self.mailer = mailer
        self.settings = settings

    def reset_url(self, token: str) -> str:
        return f"{self.settings.public_domain.rstrip('/')}/auth/reset-password/{token}"

    def _find_or_create_user(
        self, email: str, username: Optional[str], role: Optional[str]
    ) -> Tuple[User, bool]:
        user = self.db.query(User).filter(User.email == email).first()
        if user is not None:
            return user, False
        user = User(
            email=email,
            username=username or email.split("@")[0],
            role=role or "contributor",
            status="pending",
        )
        self.db.add(user)
        return user, True

    def _issue_token(self, user: User) -> Tuple[str, PasswordResetToken]:
        token = self.tokens.issue_one_time_token(user.id)
        record = PasswordResetToken(
            user_id=user.id,
            token_hash=hash_token(token),
            expires_at=datetime.now(timezone.utc) + timedelta(hours=self.settings.one_time_token_expire_hours),
        )
        self.db.add(record)
        return token, record

    def _compensate(
        self, user: User, record: PasswordResetToken, created: bool, previous_status: Optional[str]
    ) -> None:
        try:
            if created:
                self.db.delete(user)
            else:
                self.db.delete(record)
                user.status = previous_status
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            auth_logger.error("Invite rollback failed", error=e, user_id=user.id)
            return
        auth_logger.warning(
            "Invite rolled back", user_id=user.id, user_deleted=created, status=previous_status
        )

    def send_invite(self, email: str, username: Optional[str] = None, role: Optional[str] = None) -> User:
        try:
            user, created = self._find_or_create_user(email, username, role)
            previous_status = None if created else user.status
            user.status = "pending"
            self.db.flush()
            token, record = self._issue_token(user)
            self.db.commit()
            self.db.refresh(user)
        except SQLAlchemyError as e:
            self.db.rollback()
            auth_logger.error("Failed to prepare invite", error=e, email=email)
            raise ServiceError("Failed to create invitation")

        try:
            self.mailer.send_invite(email, self.reset_url(token))
        except MailDeliveryError:
            self._compensate(user, record, created, previous_status)
            raise MailDeliveryError("Failed to send invitation")

        auth_logger.info("Invitation sent", user_id=user.id, new_user=created)
        return user

    def validate_token(self, token: str) -> User:
        result = self.tokens.verify_token(token)
        if not result.valid or result.claims.get("type") != ONE_TIME_TOKEN:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        record = (
            self.db.query(PasswordResetToken)
            .filter(PasswordResetToken.token_hash == hash_token(token))
            .first()
        )
        if record is None or record.user_id != result.user_id:
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
        if _as_utc(record.expires_at) <= datetime.now(timezone.utc):
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
        if record.user.status == "disabled":
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)
        return record.user

    def set_password(self, token: str, password: str) -> User:
        if not password:
            raise ValidationError("Password is required")
        user = self.validate_token(token)

        try:
            user.hashed_password = get_password_hash(password)
            user.status = "active"
            self.db.query(PasswordResetToken).filter(
                PasswordResetToken.user_id == user.id
            ).delete(synchronize_session=False)
            self.db.commit()
            self.db.refresh(user)
        except SQLAlchemyError as e:
            self.db.rollback()
            auth_logger.error("Failed to set password", error=e, user_id=user.id)
            raise ServiceError("Failed to update password")

        auth_logger.info("Password set, account active", user_id=user.id)
        return user
