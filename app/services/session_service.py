# app/services/session_service.py
import uuid
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.errors import ValidationError
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

MAX_TOKEN_LENGTH = UserModel.__table__.c.session_id.type.length


@dataclass(frozen=True)
class SessionContext:
    token: str
    user_id: int
    issued: bool  # True = token wygenerowany teraz, trzeba go odeslac klientowi


def issue_session_token() -> str:
    return str(uuid.uuid4())


class SessionService:
    """
    Mapuje token sesji (X-Session-ID) na uzytkownika.
    Token jest zaufany, bez podpisu i bez wygasania.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def resolve(self, token: str | None) -> SessionContext:
        issued = False
        token = (token or "").strip()
        if not token:
            token = issue_session_token()
            issued = True
            logger.info(f"Issued new session {token}")
        elif len(token) > MAX_TOKEN_LENGTH:
            raise ValidationError(
                [{"field": "X-Session-ID", "message": f"Session id must be at most {MAX_TOKEN_LENGTH} characters"}],
                message="Invalid session id",
            )

        user_id = self.repo.get_or_create_by_session(token)
        self.repo.commit()

        return SessionContext(token=token, user_id=user_id, issued=issued)
