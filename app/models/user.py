from sqlalchemy import Column, String, DateTime, Boolean
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
import uuid

class User(Base):
    """User account; everything a match needs hangs off this row."""
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, index=True, nullable=False)
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    onboarding_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    # Relationships - one to one
    profile = relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    lifestyle = relationship("LifestylePreferences", back_populates="user", uselist=False, cascade="all, delete-orphan")
    values = relationship("ValuesAndBeliefs", back_populates="user", uselist=False, cascade="all, delete-orphan")
    dealbreakers = relationship("Dealbreakers", back_populates="user", uselist=False, cascade="all, delete-orphan")
    partner_preferences = relationship("PartnerPreferences", back_populates="user", uselist=False, cascade="all, delete-orphan")
    astrology = relationship("UserAstrology", back_populates="user", uselist=False, cascade="all, delete-orphan")

    # Relationships - one to many
    interests = relationship("Interest", back_populates="user", cascade="all, delete-orphan")
    photos = relationship("Photo", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User id={self.id} username={self.username} onboarded={self.onboarding_completed}>"
