from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from .database import Base


class HealthProfile(Base):
    __tablename__ = "health_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, unique=True, index=True, nullable=False)
    dietary_requirement = Column(String(255), nullable=True)
    # JSON encoded lists / dicts
    allergies = Column(Text, nullable=True)
    health_conditions = Column(Text, nullable=True)
    additional_health_data = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
