from sqlalchemy import Column, String, DateTime, Integer, Boolean, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
import uuid

class Match(Base):
    """Directed match record from a viewer (user_id) to a candidate (matched_user_id)."""
    __tablename__ = "matches"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    matched_user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    compatibility_score = Column(Integer, nullable=False)  # 0-100 aggregate
    is_liked = Column(Boolean, nullable=False, default=False)
    is_passed = Column(Boolean, nullable=False, default=False)
    is_matched = Column(Boolean, nullable=False, default=False)  # Mutual like
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", foreign_keys=[user_id])
    matched_user = relationship("User", foreign_keys=[matched_user_id])
    details = relationship("CompatibilityDetails", back_populates="match", uselist=False, cascade="all, delete-orphan")

    # A candidate is scored at most once per viewer
    __table_args__ = (
        UniqueConstraint('user_id', 'matched_user_id', name='uq_match_user_matched_user'),
    )

    def __repr__(self):
        return f"<Match id={self.id} user_id={self.user_id} matched_user_id={self.matched_user_id} score={self.compatibility_score}>"


class CompatibilityDetails(Base):
    """Per-factor breakdown persisted alongside each match."""
    __tablename__ = "compatibility_details"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    match_id = Column(String, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, unique=True)
    shared_interests_score = Column(Integer, nullable=False)
    age_compatibility_score = Column(Integer, nullable=False)
    location_proximity_score = Column(Integer, nullable=False)
    gender_orientation_score = Column(Integer, nullable=False)
    astrology_compatibility_score = Column(Integer, nullable=True)  # Null when either user opted out
    shared_interests = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, server_default=func.now())

    match = relationship("Match", back_populates="details")

    def __repr__(self):
        return f"<CompatibilityDetails match_id={self.match_id}>"
