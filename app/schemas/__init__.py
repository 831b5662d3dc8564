from app.schemas.profile import InterestIn, SocialHabits, OnboardingData, SignInfo
from app.schemas.match import (
    FactorScore, CompatibilityResult, CompatibilityDetailsResponse, MatchResponse, RevealResult
)

__all__ = [
    "InterestIn", "SocialHabits", "OnboardingData", "SignInfo",
    "FactorScore", "CompatibilityResult", "CompatibilityDetailsResponse", "MatchResponse",
    "RevealResult"
]
