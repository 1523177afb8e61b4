from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.dialect import upsert_insert
from app.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_or_create_by_session(self, session_id: str) -> int:
        """
        INSERT .. ON CONFLICT DO NOTHING + SELECT.
        Dwa rownolegle requesty z tym samym nowym tokenem nie utworza dwoch userow.
        """
        stmt = upsert_insert(self.db, UserModel).values(session_id=session_id)
        stmt = stmt.on_conflict_do_nothing(index_elements=[UserModel.session_id])
        self.db.execute(stmt)

        return self.db.execute(
            select(UserModel.id).where(UserModel.session_id == session_id)
        ).scalar_one()

    def commit(self):
        self.db.commit()
