from sqlalchemy import Column, String, DateTime, Integer, Boolean, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database import Base
import uuid

class Photo(Base):
    __tablename__ = "photos"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    filename = Column(String, nullable=False)
    url = Column(String, nullable=False)
    order_index = Column(Integer, nullable=False)  # 1, 2, 3
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="photos")

    def __repr__(self):
        return f"<Photo id={self.id} user_id={self.user_id} order={self.order_index}>"


class PhotoReveal(Base):
    """Append-only grant: one photo of one user made visible to one viewer."""
    __tablename__ = "photo_reveals"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    match_id = Column(String, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)
    revealed_by_user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    revealed_to_user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    photo_id = Column(String, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    match = relationship("Match")
    photo = relationship("Photo")

    def __repr__(self):
        return f"<PhotoReveal photo_id={self.photo_id} by={self.revealed_by_user_id} to={self.revealed_to_user_id}>"
