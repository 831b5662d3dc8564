from __future__ import annotations
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from app import crud
from app.models import Match
from app.schemas.profile import OnboardingData
from app.services.candidate_finder import create_matches_for_user
from app.services.location import DistanceProvider
from app.utils.logger import correlation_scope


def finish_onboarding(
    db: Session,
    user_id: str,
    data: OnboardingData,
    distance_provider: Optional[DistanceProvider] = None,
    today: Optional[date] = None,
) -> List[Match]:
    """
    Store the onboarding answers, then run the one-shot candidate search.

    The search is not repeated as new users join; later sign-ups only meet
    this user through their own onboarding run.
    """
    with correlation_scope():
        crud.complete_onboarding(db, user_id, data, today=today)
        return create_matches_for_user(db, user_id, distance_provider=distance_provider)
