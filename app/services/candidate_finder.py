from __future__ import annotations
from typing import Iterator, List, Optional
from sqlalchemy.orm import Session
from app import crud
from app.config import settings
from app.models import (
    User, UserProfile, Interest, LifestylePreferences, ValuesAndBeliefs,
    Dealbreakers, PartnerPreferences, UserAstrology, Match
)
from app.services.dealbreakers import passes_dealbreakers
from app.services.location import DistanceProvider
from app.services.match_profile import MatchProfile
from app.services.matching import calculate_compatibility
from app.utils.logger import get_logger, correlation_scope

logger = get_logger(__name__)

# Rows fetched per round trip while walking the candidate pool
CANDIDATE_PAGE_SIZE = 100


def _first(db: Session, model, user_id: str):
    return db.query(model).filter(model.user_id == user_id).first()


def get_user_match_profile(db: Session, user_id: str) -> Optional[MatchProfile]:
    """Assemble every record the filter and scorer need, or None without a profile."""
    user = crud.get_user(db, user_id)
    if not user:
        return None

    profile = _first(db, UserProfile, user_id)
    if not profile:
        return None

    return MatchProfile(
        user_id=user.id,
        username=user.username,
        profile=profile,
        interests=db.query(Interest).filter(Interest.user_id == user_id).all(),
        lifestyle=_first(db, LifestylePreferences, user_id),
        values=_first(db, ValuesAndBeliefs, user_id),
        dealbreakers=_first(db, Dealbreakers, user_id),
        partner_prefs=_first(db, PartnerPreferences, user_id),
        astrology=_first(db, UserAstrology, user_id),
    )


def _iter_candidate_ids(db: Session, viewer: MatchProfile) -> Iterator[str]:
    """
    Onboarded, not-yet-scored users inside the viewer's age range, in
    discovery order. Paged so a large pool is never loaded at once.
    """
    excluded = crud.get_matched_user_ids(db, viewer.user_id) | {viewer.user_id}
    prefs = viewer.partner_prefs
    query = (
        db.query(User.id)
        .join(UserProfile, UserProfile.user_id == User.id)
        .filter(
            User.onboarding_completed.is_(True),
            User.id.notin_(list(excluded)),
            UserProfile.age >= prefs.age_min,
            UserProfile.age <= prefs.age_max,
        )
        .order_by(User.created_at.asc(), User.id.asc())
    )
    offset = 0
    while True:
        page = query.offset(offset).limit(CANDIDATE_PAGE_SIZE).all()
        if not page:
            return
        for row in page:
            yield row[0]
        offset += len(page)


def find_potential_matches(db: Session, user_id: str, limit: int = 10) -> List[MatchProfile]:
    """
    Candidates that survive the age range and dealbreaker filters.

    Returns an empty list when the viewer has no profile or no partner
    preferences.
    """
    viewer = get_user_match_profile(db, user_id)
    if not viewer or not viewer.partner_prefs:
        logger.warning(f"User {user_id} has no complete profile; skipping candidate search")
        return []

    return _filter_candidates(db, viewer, limit)


def _filter_candidates(db: Session, viewer: MatchProfile, limit: int) -> List[MatchProfile]:
    candidates: List[MatchProfile] = []
    if limit <= 0:
        return candidates
    for candidate_id in _iter_candidate_ids(db, viewer):
        candidate = get_user_match_profile(db, candidate_id)
        if not candidate or not candidate.partner_prefs:
            continue
        if not passes_dealbreakers(viewer, candidate):
            continue
        candidates.append(candidate)
        if len(candidates) >= limit:
            break
    return candidates


def create_matches_for_user(
    db: Session,
    user_id: str,
    limit: Optional[int] = None,
    distance_provider: Optional[DistanceProvider] = None,
) -> List[Match]:
    """
    Score and persist matches for a viewer, one commit per candidate.

    Candidates already matched to the viewer are never rescored, so calling
    this again only considers users who were not seen before. A failure
    partway leaves the matches committed so far in place.
    """
    if limit is None:
        limit = settings.MATCH_BATCH_SIZE
    with correlation_scope():
        viewer = get_user_match_profile(db, user_id)
        if not viewer or not viewer.partner_prefs:
            logger.warning(f"User {user_id} has no complete profile; no matches created")
            return []

        created: List[Match] = []
        for candidate in _filter_candidates(db, viewer, limit):
            result = calculate_compatibility(viewer, candidate, distance_provider)
            created.append(crud.create_match(db, user_id, candidate.user_id, result))

        logger.info(f"Created {len(created)} matches for user {user_id}")
        return created
