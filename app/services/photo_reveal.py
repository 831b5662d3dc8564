from __future__ import annotations
from sqlalchemy.orm import Session
from app import crud
from app.schemas.match import RevealResult
from app.services.compatibility_constants import PHOTO_REVEAL_THRESHOLD
from app.utils.logger import get_logger

logger = get_logger(__name__)


def meets_reveal_threshold(compatibility_score: int) -> bool:
    return compatibility_score >= PHOTO_REVEAL_THRESHOLD


def can_reveal_photo(db: Session, match_id: str) -> bool:
    """Whether the stored score of a match unlocks photo reveals."""
    match = crud.get_match(db, match_id)
    return match is not None and meets_reveal_threshold(match.compatibility_score)


def request_reveal(db: Session, viewer_id: str, match_id: str, photo_id: str) -> RevealResult:
    """
    Reveal one of the viewer's own photos to the candidate of their match.

    The grant covers exactly that photo, in that direction. Repeating a
    granted request adds another grant row; visibility is unchanged.
    """
    match = crud.get_match(db, match_id)
    if match is None or match.user_id != viewer_id:
        return RevealResult(granted=False, reason="match_not_found")

    photo = crud.get_photo(db, photo_id)
    if photo is None or photo.user_id != viewer_id or not photo.is_active:
        return RevealResult(granted=False, reason="photo_not_found", compatibility_score=match.compatibility_score)

    if not meets_reveal_threshold(match.compatibility_score):
        logger.info(
            f"Reveal rejected for match {match_id}: score {match.compatibility_score} "
            f"below {PHOTO_REVEAL_THRESHOLD}"
        )
        return RevealResult(granted=False, reason="below_threshold", compatibility_score=match.compatibility_score)

    reveal = crud.create_photo_reveal(
        db,
        match_id=match.id,
        revealed_by_user_id=viewer_id,
        revealed_to_user_id=match.matched_user_id,
        photo_id=photo.id,
    )
    logger.info(f"Photo {photo.id} revealed by {viewer_id} to {match.matched_user_id}")
    return RevealResult(granted=True, reveal_id=reveal.id, compatibility_score=match.compatibility_score)


def is_photo_revealed(db: Session, photo_id: str, viewer_id: str) -> bool:
    return crud.has_photo_reveal(db, photo_id, viewer_id)
