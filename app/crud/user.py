from sqlalchemy.orm import Session
from app.models import User
from typing import Optional

def get_user(db: Session, user_id: str) -> Optional[User]:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()

def create_user(db: Session, username: str, user_id: Optional[str] = None) -> User:
    """
    Create a new user who has not yet completed onboarding.

    Args:
        db: Database session
        username: Unique username
        user_id: Optional explicit ID; a UUID is generated otherwise

    Returns:
        Created user
    """
    db_user = User(username=username, onboarding_completed=False)
    if user_id:
        db_user.id = user_id
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
