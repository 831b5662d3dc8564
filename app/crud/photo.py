from sqlalchemy.orm import Session
from typing import List, Optional
from app.models import Photo, PhotoReveal

def create_photo(db: Session, user_id: str, filename: str, url: str, order_index: int) -> Photo:
    db_photo = Photo(
        user_id=user_id,
        filename=filename,
        url=url,
        order_index=order_index,
        is_active=True
    )
    db.add(db_photo)
    db.commit()
    db.refresh(db_photo)
    return db_photo

def get_photo(db: Session, photo_id: str) -> Optional[Photo]:
    return db.query(Photo).filter(Photo.id == photo_id).first()

def get_user_photos(db: Session, user_id: str) -> List[Photo]:
    """Active photos in display order."""
    return db.query(Photo).filter(
        Photo.user_id == user_id,
        Photo.is_active.is_(True)
    ).order_by(Photo.order_index).all()

def deactivate_photo(db: Session, photo_id: str, user_id: str) -> bool:
    """Soft-delete a photo owned by the user."""
    photo = db.query(Photo).filter(Photo.id == photo_id, Photo.user_id == user_id).first()
    if not photo:
        return False
    photo.is_active = False
    db.commit()
    return True

def create_photo_reveal(db: Session, match_id: str, revealed_by_user_id: str, revealed_to_user_id: str, photo_id: str) -> PhotoReveal:
    reveal = PhotoReveal(
        match_id=match_id,
        revealed_by_user_id=revealed_by_user_id,
        revealed_to_user_id=revealed_to_user_id,
        photo_id=photo_id
    )
    db.add(reveal)
    db.commit()
    db.refresh(reveal)
    return reveal

def has_photo_reveal(db: Session, photo_id: str, viewer_id: str) -> bool:
    """Whether any grant exposes this photo to the viewer."""
    return db.query(PhotoReveal.id).filter(
        PhotoReveal.photo_id == photo_id,
        PhotoReveal.revealed_to_user_id == viewer_id
    ).first() is not None
