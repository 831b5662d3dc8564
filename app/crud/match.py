from sqlalchemy.orm import Session, joinedload
from typing import List, Optional, Set
from app.models import Match, CompatibilityDetails
from app.schemas.match import CompatibilityResult
from app.utils.logger import get_logger

logger = get_logger(__name__)

def create_match(db: Session, user_id: str, matched_user_id: str, result: CompatibilityResult) -> Match:
    """Persist a match and its compatibility details as one commit."""
    db_match = Match(
        user_id=user_id,
        matched_user_id=matched_user_id,
        compatibility_score=result.total_score,
        is_liked=False,
        is_passed=False,
        is_matched=False,
    )
    db_match.details = CompatibilityDetails(
        shared_interests_score=result.shared_interests_score,
        age_compatibility_score=result.age_compatibility_score,
        location_proximity_score=result.location_proximity_score,
        gender_orientation_score=result.gender_orientation_score,
        astrology_compatibility_score=result.astrology_compatibility_score,
        shared_interests=result.shared_interests,
    )
    db.add(db_match)
    try:
        db.commit()
    except Exception as e:
        logger.error(f"Error creating match {user_id} -> {matched_user_id}: {e}")
        db.rollback()
        raise
    db.refresh(db_match)
    return db_match

def get_match(db: Session, match_id: str) -> Optional[Match]:
    return db.query(Match).options(joinedload(Match.details)).filter(Match.id == match_id).first()

def get_matched_user_ids(db: Session, user_id: str) -> Set[str]:
    """IDs of every candidate already scored for this viewer."""
    rows = db.query(Match.matched_user_id).filter(Match.user_id == user_id).all()
    return {row[0] for row in rows}

def get_matches_for_user(db: Session, user_id: str, limit: int = 20, include_passed: bool = False) -> List[Match]:
    """A viewer's matches ranked for display, best score first."""
    query = db.query(Match).options(joinedload(Match.details)).filter(Match.user_id == user_id)
    if not include_passed:
        query = query.filter(Match.is_passed.is_(False))
    return query.order_by(Match.compatibility_score.desc(), Match.created_at.asc()).limit(limit).all()

def _get_owned_match(db: Session, user_id: str, match_id: str) -> Optional[Match]:
    return db.query(Match).filter(Match.id == match_id, Match.user_id == user_id).first()

def like_match(db: Session, user_id: str, match_id: str) -> Optional[Match]:
    """
    Like a match. When the candidate's own record for this viewer is also
    liked, both directed records are flagged as matched.
    """
    match = _get_owned_match(db, user_id, match_id)
    if not match:
        return None

    match.is_liked = True
    reciprocal = db.query(Match).filter(
        Match.user_id == match.matched_user_id,
        Match.matched_user_id == user_id,
    ).first()
    if reciprocal and reciprocal.is_liked:
        match.is_matched = True
        reciprocal.is_matched = True
        logger.info(f"Mutual match between {user_id} and {match.matched_user_id}")

    db.commit()
    db.refresh(match)
    return match

def pass_match(db: Session, user_id: str, match_id: str) -> Optional[Match]:
    match = _get_owned_match(db, user_id, match_id)
    if not match:
        return None
    match.is_passed = True
    db.commit()
    db.refresh(match)
    return match
