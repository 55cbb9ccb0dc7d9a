from sqlalchemy import Column, Integer, String, DateTime, func
from core.database import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    daily_goal = Column(Integer, nullable=False, default=10, server_default="10")
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
