# app/api/deps.py
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.services.session_service import SessionService, SessionContext, issue_session_token

SESSION_HEADER = "X-Session-ID"


async def session_middleware(request: Request, call_next):
    """
    Kazdy request dostaje token sesji. Nowy token wraca w naglowku
    rowniez przy odpowiedziach z bledem i dla tras bez koszyka.
    """
    token = (request.headers.get(SESSION_HEADER) or "").strip()
    issued = not token
    if issued:
        token = issue_session_token()

    request.state.session_id = token
    response = await call_next(request)

    if issued:
        response.headers[SESSION_HEADER] = token
    return response


def get_session(request: Request, db: Session = Depends(get_db)) -> SessionContext:
    """Mapuje token z session_middleware na uzytkownika."""
    return SessionService(db).resolve(getattr(request.state, "session_id", None))


CurrentSession = Annotated[SessionContext, Depends(get_session)]
DbSession = Annotated[Session, Depends(get_db)]
