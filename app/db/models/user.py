from sqlalchemy import Column, String

from app.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    # Строка, а не Enum: неизвестные значения разбираются при чтении
    role = Column(String(32), nullable=False, default="viewer")
