from app.database import Base
from app.models.user import User
from app.models.profile import (
    UserProfile, Interest, LifestylePreferences, ValuesAndBeliefs,
    Dealbreakers, PartnerPreferences, UserAstrology
)
from app.models.match import Match, CompatibilityDetails
from app.models.photo import Photo, PhotoReveal

__all__ = [
    "Base", "User",
    "UserProfile", "Interest", "LifestylePreferences", "ValuesAndBeliefs",
    "Dealbreakers", "PartnerPreferences", "UserAstrology",
    "Match", "CompatibilityDetails",
    "Photo", "PhotoReveal"
]
