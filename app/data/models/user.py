from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime

from app.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    # token z naglowka X-Session-ID, 1:1 z uzytkownikiem
    session_id = Column(String(255), nullable=False, unique=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
