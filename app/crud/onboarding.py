from datetime import date, datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session
from app.models import (
    User, UserProfile, Interest, LifestylePreferences, ValuesAndBeliefs,
    Dealbreakers, PartnerPreferences, UserAstrology
)
from app.schemas.profile import OnboardingData
from app.services.astrology import calculate_sign
from app.utils.dates import calculate_age
from app.utils.logger import get_logger

logger = get_logger(__name__)

def complete_onboarding(db: Session, user_id: str, data: OnboardingData, today: Optional[date] = None) -> UserProfile:
    """
    Persist every onboarding step for a user in a single transaction.

    Derives the age and sun sign from the birthdate and marks the user as
    onboarded. Nothing is written if any step fails.

    Raises:
        ValueError: If the user does not exist or already completed onboarding
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise ValueError(f"User {user_id} not found")
    if user.onboarding_completed:
        raise ValueError(f"User {user_id} already completed onboarding")

    try:
        profile = UserProfile(
            user_id=user_id,
            name=data.name,
            birthdate=data.birthdate,
            age=calculate_age(data.birthdate, today),
            gender=data.gender,
            orientation=data.orientation,
            country=data.country,
            state=data.state,
            city=data.city,
            bio=data.bio,
            occupation=data.occupation,
        )
        db.add(profile)

        db.add_all([
            Interest(user_id=user_id, category=item.category, interest=item.interest)
            for item in data.interests
        ])

        db.add(LifestylePreferences(
            user_id=user_id,
            exercise_types=data.exercise_types,
            diet=data.diet,
            travel=data.travel,
            social_activities=data.social_activities,
            social_habits=data.social_habits.model_dump(exclude_none=True),
        ))

        db.add(ValuesAndBeliefs(
            user_id=user_id,
            core_values=data.core_values,
            kids=data.kids,
            growth_goals=data.growth_goals,
            intimacy_preferences=data.intimacy_preferences,
            pet_preferences=data.pet_preferences,
        ))

        db.add(Dealbreakers(user_id=user_id, dealbreakers=data.dealbreakers))

        db.add(PartnerPreferences(
            user_id=user_id,
            age_min=data.age_min,
            age_max=data.age_max,
            distance=data.distance,
            distance_unit=data.distance_unit,
            long_distance=data.long_distance,
            meeting_timeline=data.meeting_timeline,
            height_preference=data.height_preference,
            body_type_preference=data.body_type_preference,
            ethnicity_preferences=data.ethnicity_preferences,
            dealbreakers=data.partner_dealbreakers,
        ))

        db.add(UserAstrology(
            user_id=user_id,
            sun_sign=calculate_sign(data.birthdate).value,
            enable_astrology_matching=data.enable_astrology_matching,
        ))

        user.onboarding_completed = True
        user.onboarding_at = datetime.now(timezone.utc)

        db.commit()
    except Exception as e:
        logger.error(f"Error completing onboarding for user {user_id}: {e}")
        db.rollback()
        raise

    db.refresh(profile)
    logger.info(f"User {user_id} completed onboarding (age={profile.age})")
    return profile

def set_astrology_matching(db: Session, user_id: str, enabled: bool) -> Optional[UserAstrology]:
    """Toggle the astrology opt-in. Existing match scores are not recomputed."""
    astrology = db.query(UserAstrology).filter(UserAstrology.user_id == user_id).first()
    if not astrology:
        return None
    astrology.enable_astrology_matching = enabled
    db.commit()
    db.refresh(astrology)
    return astrology
